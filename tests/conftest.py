"""
Gemeinsame pytest-Fixtures für die Kursverwaltung.
"""

import pytest

from kursverwaltung.domain import Course, Student, Teacher
from kursverwaltung.persistence import DataManager


@pytest.fixture
def beispiel_manager():
    """DataManager mit den Beispieldaten."""
    manager = DataManager()
    manager.students.append(Student(id=1, name="John Doe", course_ids=[1, 2]))
    manager.students.append(Student(id=2, name="Alice Smith", course_ids=[1]))
    manager.teachers.append(Teacher(id=1, name="Mr. Smith", experience=10, course_ids=[1]))
    manager.courses.append(Course(id=1, name="Math 101", teacher_id=1, student_ids=[1, 2]))
    return manager


@pytest.fixture
def data_file(tmp_path):
    """Pfad einer noch nicht vorhandenen Datendatei."""
    return tmp_path / "data.txt"
