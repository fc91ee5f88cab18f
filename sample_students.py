#!/usr/bin/env python3
"""
Generate a sample roster file with realistic student data for trying out the menu.
"""
import random
from typing import List, Optional

import pandas as pd
from faker import Faker

from config import DATA_FILE
from file_handler import FileHandler
from models import Student

COURSES = ['CS', 'Mathematics', 'Physics', 'Chemistry', 'Biology', 'Economics']


def create_sample_students(count: int = 20, seed: Optional[int] = None) -> List[Student]:
    """Create `count` students with sequential roll numbers starting at 1."""
    fake = Faker('en_IN')  # Indian locale for better names
    rng = random.Random(seed)
    if seed is not None:
        fake.seed_instance(seed)

    students = []
    for roll_no in range(1, count + 1):
        first_name = fake.first_name()
        last_name = fake.last_name()
        email = f"{first_name}.{last_name}{roll_no}@{fake.free_email_domain()}".lower()

        students.append(Student(
            roll_no,
            f"{first_name} {last_name}",
            email,
            rng.choice(COURSES),
            round(rng.uniform(35, 100), 1)
        ))

    return students


def create_sample_roster(output_file: str = DATA_FILE, count: int = 20, seed: Optional[int] = None):
    students = create_sample_students(count, seed)
    if FileHandler().write_students(output_file, students) is None:
        return None, students

    df = pd.DataFrame([student.to_dict() for student in students])

    print(f"Sample roster created in '{output_file}'")
    print(f"Total students: {len(df)}")
    print(f"Courses: {sorted(df['course'].unique())}")
    print(f"Students per course: {df['course'].value_counts().to_dict()}")
    print(f"Average marks: {df['marks'].mean():.2f}")

    return output_file, students


def main():
    print("🎓 Creating Sample Student Roster")
    print("=" * 50)

    output_file, _ = create_sample_roster()
    if not output_file:
        print(f"\n❌ Could not write '{DATA_FILE}'")
        return 1

    print("\n✅ Run 'student-roster' in this folder to open it")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
