from file_handler import FileHandler
from sample_students import COURSES, create_sample_students, create_sample_roster


def test_sample_students_are_valid_roster_records(manager):
    students = create_sample_students(15, seed=7)
    assert [s.roll_no for s in students] == list(range(1, 16))
    for student in students:
        assert student.course in COURSES
        assert 35 <= student.marks <= 100
        assert ',' not in student.name + student.email
        assert manager.add(student)


def test_same_seed_same_data():
    first = [s.to_dict() for s in create_sample_students(5, seed=3)]
    second = [s.to_dict() for s in create_sample_students(5, seed=3)]
    assert first == second


def test_create_sample_roster_round_trips(tmp_path, capsys):
    target = str(tmp_path / 'students.txt')
    output_file, students = create_sample_roster(target, count=8, seed=1)

    assert output_file == target
    loaded, skipped = FileHandler().read_students(target)
    assert [s.to_dict() for s in loaded] == [s.to_dict() for s in students]
    assert skipped == []
    assert 'Total students: 8' in capsys.readouterr().out
