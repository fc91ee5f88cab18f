# Student records are held in memory and persisted to a flat text file.
# See file_handler.FileHandler for the on-disk format.

from typing import Dict

from config import DELIMITER


class Student:
    def __init__(self, roll_no: int, name: str, email: str, course: str, marks: float):
        self.roll_no = roll_no
        self.name = name
        self.email = email
        self.course = course
        self.marks = marks

    def to_line(self) -> str:
        """
        Format the student as one persisted line.
        Field order: roll, name, email, course, marks
        """
        fields = [self.roll_no, self.name, self.email, self.course, self.marks]
        return DELIMITER.join(str(field) for field in fields)

    def to_dict(self) -> Dict:
        return {
            'roll_no': self.roll_no,
            'name': self.name,
            'email': self.email,
            'course': self.course,
            'marks': self.marks
        }

    def __repr__(self):
        return f"Student({self.roll_no!r}, {self.name!r}, {self.email!r}, {self.course!r}, {self.marks!r})"

    def __str__(self):
        return (f"Roll No: {self.roll_no}\n"
                f"Name: {self.name}\n"
                f"Email: {self.email}\n"
                f"Course: {self.course}\n"
                f"Marks: {self.marks}")
