import logging
from typing import List

from config import DATA_FILE, DEFAULT_READ_LENGTH, LOG_LEVEL, LOG_FORMAT
from file_inspector import FileInspector
from models import Student
from roster_manager import RosterManager

MENU = """Capstone Student Menu
1. Add Student
2. View All Students
3. Search by Name
4. Delete by Name
5. Sort by Marks
6. Sort by Name
7. File Attributes
8. Random Read Demo
9. Save and Exit"""


def prompt_int(prompt: str) -> int:
    text = input(prompt)
    while True:
        try:
            return int(text.strip())
        except ValueError:
            text = input("Invalid integer. Try again: ")


def prompt_float(prompt: str) -> float:
    text = input(prompt)
    while True:
        try:
            return float(text.strip())
        except ValueError:
            text = input("Invalid number. Try again: ")


def prompt_student() -> Student:
    roll_no = prompt_int("Enter Roll No: ")
    name = input("Enter Name: ").strip()
    email = input("Enter Email: ").strip()
    course = input("Enter Course: ").strip()
    marks = prompt_float("Enter Marks: ")
    return Student(roll_no, name, email, course, marks)


def print_students(students: List[Student]):
    for student in students:
        print(student)
        print()


def print_loaded(students: List[Student]):
    if not students:
        return
    print("Loaded students from file:")
    print_students(students)


def parse_or_default(text: str, default: int) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return default


def run_menu(manager: RosterManager, data_file: str, inspector: FileInspector):
    """
    Drive the roster from standard input until the user saves and exits.
    Running out of input ends the session the same way as option 9.
    """
    while True:
        print(MENU)
        try:
            choice = parse_or_default(input("Enter choice: "), -1)

            if choice == 1:
                if manager.add(prompt_student()):
                    print("Student added.\n")
                else:
                    print("Invalid data. Not added.\n")

            elif choice == 2:
                print(manager.view_all(), end='')

            elif choice == 3:
                results = manager.search_by_name(input("Enter Name to search: ").strip())
                if results:
                    print_students(results)
                else:
                    print("No records found.\n")

            elif choice == 4:
                deleted = manager.delete_by_name(input("Enter Name to delete: ").strip())
                print("Deleted.\n" if deleted else "No matching records.\n")

            elif choice == 5:
                answer = input("Sort by marks ascending? (y/n): ").strip().lower()
                manager.sort_by_marks(answer.startswith('y'))
                print("Sorted Student List by Marks:")
                print(manager.view_all(), end='')

            elif choice == 6:
                manager.sort_by_name()
                print("Sorted Student List by Name:")
                print(manager.view_all(), end='')

            elif choice == 7:
                print(inspector.format_description(inspector.describe(data_file)))
                print()

            elif choice == 8:
                position = parse_or_default(input("Enter byte position: "), 0)
                length = parse_or_default(input("Enter length: "), DEFAULT_READ_LENGTH)
                print("Random read snippet:")
                print(inspector.read_range(data_file, position, length))
                print()

            elif choice == 9:
                break

            else:
                print("Invalid choice.\n")

        except EOFError:
            print()
            break

    if manager.save(data_file):
        print("Saved. Exiting.")
    else:
        print(f"Could not save to {data_file}. Exiting.")


def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    manager = RosterManager()
    manager.load(DATA_FILE)
    print_loaded(manager.get_students())

    run_menu(manager, DATA_FILE, FileInspector())
    return 0


if __name__ == '__main__':
    main()
