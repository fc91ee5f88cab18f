import math
import logging
from typing import List, Dict, Optional, Tuple

from file_handler import FileHandler
from models import Student


class RosterManager:
    """
    Authoritative in-memory roster.

    `students` keeps insertion order, which is also the display and save order.
    `by_name` maps a lowercased name to every student with that name and
    `by_roll` maps a roll number to the last student added with it. Every
    mutating method leaves both indexes consistent with `students`.
    """

    def __init__(self, file_handler: Optional[FileHandler] = None):
        self.logger = logging.getLogger(__name__)
        self.file_handler = file_handler or FileHandler()
        self.students: List[Student] = []
        self.by_name: Dict[str, List[Student]] = {}
        self.by_roll: Dict[int, Student] = {}
        self.skipped_lines: List[Tuple[int, str]] = []
        # id(student) -> position in the order students were added or loaded
        self._added: Dict[int, int] = {}
        self._next_seq = 0

    def __len__(self):
        return len(self.students)

    def load(self, filepath: str) -> bool:
        """
        Replace the roster with the contents of `filepath`.
        Returns False when the file exists but could not be read; the roster
        is left empty in that case.
        """
        self.students.clear()
        self.by_name.clear()
        self.by_roll.clear()
        self._added.clear()

        students, self.skipped_lines = self.file_handler.read_students(filepath)
        if students is None:
            return False

        for student in students:
            self.students.append(student)
            self._index(student)

        self.logger.debug(f"Loaded {len(self.students)} students from {filepath}")
        return True

    def save(self, filepath: str) -> bool:
        return self.file_handler.write_students(filepath, self.students) is not None

    def _index(self, student: Student):
        self._added[id(student)] = self._next_seq
        self._next_seq += 1
        self.by_roll[student.roll_no] = student
        self.by_name.setdefault(student.name.lower(), []).append(student)

    def _is_valid(self, student: Student) -> bool:
        for field in [student.name, student.email, student.course]:
            if not isinstance(field, str) or not field.strip():
                return False

        marks = student.marks
        if isinstance(marks, bool) or not isinstance(marks, (int, float)):
            return False
        return not math.isnan(marks)

    def add(self, student: Student) -> bool:
        if not self._is_valid(student):
            self.logger.debug(f"Rejected invalid student record: {student!r}")
            return False

        self.students.append(student)
        self._index(student)
        return True

    def view_all(self) -> str:
        return "".join(f"{student}\n\n" for student in self.students)

    def get_students(self) -> List[Student]:
        return list(self.students)

    def search_by_name(self, name: Optional[str]) -> List[Student]:
        if name is None:
            return []
        return list(self.by_name.get(name.lower(), []))

    def find_by_roll(self, roll_no: int) -> Optional[Student]:
        return self.by_roll.get(roll_no)

    def delete_by_name(self, name: Optional[str]) -> bool:
        """
        Remove every student whose name matches `name` case-insensitively.
        Returns False, leaving the roster untouched, when nothing matches.

        Roll slots held by a matching name are dropped and then handed to the
        most recently added remaining student with the same roll number, if
        any, regardless of how the roster has been sorted since. Without
        that step a student sharing a roll number with a deleted one would
        drop out of the roll index while still on the roster.
        """
        if name is None:
            return False

        key = name.lower()
        matches = self.by_name.get(key)
        if not matches:
            return False

        doomed = set(id(student) for student in matches)
        self.students[:] = [student for student in self.students if id(student) not in doomed]
        del self.by_name[key]
        for student in matches:
            self._added.pop(id(student), None)

        vacated = [roll for roll, student in self.by_roll.items() if student.name.lower() == key]
        for roll in vacated:
            del self.by_roll[roll]

        survivors = sorted(self.students, key=lambda student: self._added[id(student)])
        for student in survivors:
            if student.roll_no in vacated:
                self.by_roll[student.roll_no] = student

        self.logger.debug(f"Deleted {len(matches)} students named {name!r}, freed rolls {vacated}")
        return True

    def sort_by_marks(self, ascending: bool = True):
        """
        Stable sort by marks. NaN marks, which only arrive through load,
        count as the highest value so the ordering stays total.
        """
        self.students.sort(key=self._marks_key, reverse=not ascending)

    def _marks_key(self, student: Student):
        if math.isnan(student.marks):
            return (1, 0.0)
        return (0, student.marks)

    def sort_by_name(self):
        self.students.sort(key=lambda student: student.name.lower())
