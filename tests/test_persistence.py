"""
Tests für FileStorage und DataManager.
"""

import logging

import pytest

from kursverwaltung.domain import Course, Student, Teacher
from kursverwaltung.errors import ConversionError, FormatError
from kursverwaltung.persistence import DataManager, FileStorage


def test_save_writes_lines_in_order(beispiel_manager, data_file):
    beispiel_manager.save(data_file)
    assert data_file.read_text(encoding="utf-8").splitlines() == [
        "student 1 John Doe 1,2",
        "student 2 Alice Smith 1",
        "teacher 1 Mr. Smith 10 1",
        "course 1 Math 101 1 1,2",
    ]


def test_save_truncates(beispiel_manager, data_file):
    data_file.write_text("alt\n" * 50, encoding="utf-8")
    beispiel_manager.save(data_file)
    assert "alt" not in data_file.read_text(encoding="utf-8")


def test_save_then_load_reproduces_collections(beispiel_manager, data_file):
    beispiel_manager.save(data_file)
    neu = DataManager()
    neu.load(data_file)
    assert neu.students == beispiel_manager.students
    assert neu.teachers == beispiel_manager.teachers
    assert neu.courses == beispiel_manager.courses


def test_empty_lists_survive_save_and_load(data_file):
    manager = DataManager()
    manager.add(Student(id=1, name="Ohne Kurse"))
    manager.add(Course(id=1, name="Leer", teacher_id=3))
    manager.save(data_file)

    neu = DataManager()
    neu.load(data_file)
    assert neu.students == [Student(id=1, name="Ohne Kurse", course_ids=[])]
    assert neu.courses == [Course(id=1, name="Leer", teacher_id=3, student_ids=[])]


def test_unknown_tags_are_skipped(data_file):
    data_file.write_text(
        "unknown 1 2 3\nstudent 1 John Doe 1,2\n\nroom 4 B\n", encoding="utf-8"
    )
    manager = DataManager()
    manager.load(data_file)
    assert manager.students == [Student(id=1, name="John Doe", course_ids=[1, 2])]
    assert manager.teachers == []
    assert manager.courses == []
    assert len(manager) == 1


def test_load_appends(beispiel_manager, tmp_path):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    beispiel_manager.save(a)
    b.write_text("teacher 7 Ms. Lee 3 2,4\n", encoding="utf-8")

    manager = DataManager()
    manager.load(a)
    manager.load(b)
    assert len(manager.students) == 2
    assert len(manager.teachers) == 2
    assert len(manager.courses) == 1
    assert manager.teachers[-1] == Teacher(id=7, name="Ms. Lee", experience=3, course_ids=[2, 4])


def test_duplicate_ids_are_kept(data_file):
    data_file.write_text("student 1 A 1\nstudent 1 A 1\n", encoding="utf-8")
    manager = DataManager()
    manager.load(data_file)
    assert len(manager.students) == 2


def test_load_handles_crlf(data_file):
    data_file.write_bytes(b"student 1 John Doe 1,2\r\ncourse 1 Math 101 1 1,2\r\n")
    manager = DataManager()
    manager.load(data_file)
    assert manager.students[0].course_ids == (1, 2)
    assert manager.courses[0].student_ids == (1, 2)


def test_format_error_carries_line_number(data_file):
    data_file.write_text("student 1 John Doe 1\nstudent 1\n", encoding="utf-8")
    manager = DataManager()
    with pytest.raises(FormatError) as exc:
        manager.load(data_file)
    assert exc.value.line_number == 2
    assert str(exc.value).startswith("Zeile 2:")
    # Die erste Zeile wurde vor dem Fehler schon übernommen.
    assert len(manager.students) == 1


def test_conversion_error_carries_line_number(data_file):
    data_file.write_text("teacher 1 Mr. Smith zehn 1\n", encoding="utf-8")
    with pytest.raises(ConversionError) as exc:
        DataManager().load(data_file)
    assert exc.value.line_number == 1


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        DataManager().load(tmp_path / "fehlt.txt")


def test_save_to_missing_directory_raises(beispiel_manager, tmp_path):
    with pytest.raises(OSError):
        beispiel_manager.save(tmp_path / "gibt" / "es" / "nicht.txt")


def test_add_and_clear():
    manager = DataManager()
    manager.add(Student(id=1, name="A"))
    manager.add(Teacher(id=1, name="B", experience=1))
    manager.add(Course(id=1, name="C", teacher_id=1))
    assert len(manager) == 3
    manager.clear()
    assert len(manager) == 0


def test_atomic_save_replaces_file(beispiel_manager, data_file):
    data_file.write_text("alt\n", encoding="utf-8")
    manager = DataManager(FileStorage(atomic=True))
    manager.students.extend(beispiel_manager.students)
    manager.save(data_file)

    assert data_file.read_text(encoding="utf-8") == "student 1 John Doe 1,2\nstudent 2 Alice Smith 1\n"
    assert [p.name for p in data_file.parent.iterdir()] == ["data.txt"]


def test_atomic_save_cleans_up_on_error(data_file):
    def kaputte_zeilen():
        yield "student 1 A 1"
        raise RuntimeError("abbruch")

    data_file.write_text("alt\n", encoding="utf-8")
    with pytest.raises(RuntimeError):
        FileStorage(atomic=True).schreibe_zeilen(data_file, kaputte_zeilen())

    assert data_file.read_text(encoding="utf-8") == "alt\n"
    assert [p.name for p in data_file.parent.iterdir()] == ["data.txt"]


def test_skip_is_logged_at_debug(data_file, caplog):
    data_file.write_text("unknown 1\n", encoding="utf-8")
    with caplog.at_level(logging.DEBUG, logger="kursverwaltung.persistence"):
        DataManager().load(data_file)
    assert "unbekanntes Kennzeichen" in caplog.text


def test_lone_carriage_return_stays_in_line(data_file):
    data_file.write_bytes(b"student 1 A\rB 1\nstudent 2 C 2\n")
    manager = DataManager()
    manager.load(data_file)
    assert manager.students == [
        Student(id=1, name="A\rB", course_ids=[1]),
        Student(id=2, name="C", course_ids=[2]),
    ]


def test_save_writes_lf_only(beispiel_manager, data_file):
    beispiel_manager.save(data_file)
    assert b"\r" not in data_file.read_bytes()


def test_invalid_utf8_raises_decode_error(data_file):
    data_file.write_bytes(b"student 1 \xff 1\n")
    with pytest.raises(UnicodeDecodeError):
        DataManager().load(data_file)
