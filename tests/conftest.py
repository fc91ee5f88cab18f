import pytest

from models import Student
from roster_manager import RosterManager


@pytest.fixture
def data_file(tmp_path):
    return str(tmp_path / 'students.txt')


@pytest.fixture
def manager():
    return RosterManager()


@pytest.fixture
def make_student(faker):
    """Build a valid student, with Faker filling any field not given."""
    def _make(roll_no=None, name=None, email=None, course=None, marks=None):
        return Student(
            roll_no if roll_no is not None else faker.random_int(1, 9999),
            name or faker.first_name(),
            email or faker.email(),
            course or faker.random_element(['CS', 'Physics', 'Mathematics']),
            marks if marks is not None else float(faker.random_int(0, 1000)) / 10
        )
    return _make
