import os
import logging
from typing import Optional, List, Tuple

from config import DELIMITER, FIELD_COUNT
from models import Student


class FileHandler:
    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def read_students(self, filepath: str) -> Tuple[Optional[List[Student]], List[Tuple[int, str]]]:
        """
        Read student records from a delimited text file.
        Expected line format: roll,name,email,course,marks

        Returns:
            Tuple of (students, skipped_lines). students is None when the file
            exists but could not be read; a missing file gives an empty list.
            skipped_lines holds (line_number, reason) for every malformed line.
        """
        students = []
        skipped = []

        if not os.path.exists(filepath):
            self.logger.debug(f"No data file at {filepath}, starting empty")
            return students, skipped

        try:
            with open(filepath, 'r', encoding='utf-8', errors='replace') as f:
                for line_number, line in enumerate(f, 1):
                    student, reason = self._parse_line(line.rstrip('\r\n'))
                    if student is not None:
                        students.append(student)
                    elif reason:
                        self.logger.warning(f"Skipping line {line_number} of {filepath}: {reason}")
                        skipped.append((line_number, reason))

        except OSError as e:
            self.logger.error(f"Error reading student file: {str(e)}")
            return None, skipped

        return students, skipped

    def _parse_line(self, line: str) -> Tuple[Optional[Student], str]:
        """
        Parse one persisted line. Returns (student, '') or (None, reason).
        Blank lines give (None, '') and are skipped without a warning.
        """
        if not line.strip():
            return None, ''

        parts = line.split(DELIMITER)
        if len(parts) != FIELD_COUNT:
            return None, f"expected {FIELD_COUNT} fields, got {len(parts)}"

        roll_text, name, email, course, marks_text = [part.strip() for part in parts]

        try:
            roll_no = self._to_number(roll_text, int)
            marks = self._to_number(marks_text, float)
        except ValueError as e:
            return None, f"bad number ({str(e)})"

        if not name or not email or not course:
            return None, "empty name, email or course"

        return Student(roll_no, name, email, course, marks), ''

    def _to_number(self, text: str, kind):
        # int() and float() also take '1_0' and non-ASCII digits, which the file format does not
        if '_' in text or not text.isascii():
            raise ValueError(f"invalid number: {text!r}")
        return kind(text)

    def write_students(self, filepath: str, students: List[Student]) -> Optional[str]:
        """
        Overwrite the file with one line per student, in order.
        Returns the file path on success, None if the file could not be written.
        """
        try:
            with open(filepath, 'w', encoding='utf-8', newline='\n') as f:
                for student in students:
                    if self._has_delimiter(student):
                        self.logger.warning(
                            f"Roll {student.roll_no} has '{DELIMITER}' inside a field and will not reload cleanly"
                        )
                    f.write(student.to_line() + '\n')

            self.logger.info(f"Saved {len(students)} students to {filepath}")
            return filepath

        except OSError as e:
            self.logger.error(f"Error writing student file: {str(e)}")
            return None

    def _has_delimiter(self, student: Student) -> bool:
        return any(DELIMITER in field for field in [student.name, student.email, student.course])
