from models import Student


def test_to_line_uses_fixed_field_order():
    student = Student(1, 'Ann', 'a@x.com', 'CS', 88.5)
    assert student.to_line() == '1,Ann,a@x.com,CS,88.5'


def test_to_line_keeps_float_form_for_whole_marks():
    assert Student(7, 'Bo', 'b@x.com', 'Math', 90.0).to_line() == '7,Bo,b@x.com,Math,90.0'


def test_str_is_multiline_display_form():
    student = Student(1, 'Ann', 'a@x.com', 'CS', 88.5)
    assert str(student) == "Roll No: 1\nName: Ann\nEmail: a@x.com\nCourse: CS\nMarks: 88.5"


def test_to_dict():
    student = Student(3, 'Cy', 'c@x.com', 'Bio', 71.25)
    assert student.to_dict() == {
        'roll_no': 3, 'name': 'Cy', 'email': 'c@x.com', 'course': 'Bio', 'marks': 71.25
    }
