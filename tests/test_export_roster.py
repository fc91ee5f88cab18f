import os

import export_roster
from file_handler import FileHandler
from models import Student


def test_main_exports_saved_roster(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    FileHandler().write_students('students.txt', [Student(1, 'Ann', 'a@x.com', 'CS', 88.5)])

    assert export_roster.main() == 0
    assert os.path.exists(os.path.join('exports', 'student_roster.xlsx'))
    assert 'Exported 1 students' in capsys.readouterr().out


def test_main_reports_unreadable_roster(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    os.mkdir('students.txt')
    assert export_roster.main() == 1
