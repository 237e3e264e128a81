"""
Domain beinhaltet die Entities

Dieses Modul enthält nur die Datensätze.
Es enthält keine Datei- oder Parsing-Logik.

- Entities sind unveränderliche Dataclasses.
- Jede Entity kennt ihr Typ-Kennzeichen (TAG) und ihre Textzeile.
- Referenzen (Kurs-, Lehrer-, Studenten-IDs) werden nicht geprüft.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Tuple, Union


def _join_ids(ids: Iterable[int]) -> str:
    """IDs kommagetrennt. Leere Liste ergibt einen leeren String."""
    return ",".join(str(i) for i in ids)


@dataclass(frozen=True, slots=True)
class Student:
    """
    Ein Student mit seinen Kursen.
    course_ids wird immer als Tupel gespeichert.
    """
    TAG: ClassVar[str] = "student"

    id: int
    name: str
    course_ids: Tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "course_ids", tuple(self.course_ids))

    def to_line(self) -> str:
        """Textzeile: student <id> <name> <kurse>"""
        return f"{self.TAG} {self.id} {self.name} {_join_ids(self.course_ids)}"

    def __str__(self) -> str:
        return self.to_line()


@dataclass(frozen=True, slots=True)
class Teacher:
    """
    Ein Lehrer.
    experience ist die Berufserfahrung in Jahren.
    """
    TAG: ClassVar[str] = "teacher"

    id: int
    name: str
    experience: int = 0
    course_ids: Tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "course_ids", tuple(self.course_ids))

    def to_line(self) -> str:
        """Textzeile: teacher <id> <name> <erfahrung> <kurse>"""
        return f"{self.TAG} {self.id} {self.name} {self.experience} {_join_ids(self.course_ids)}"

    def __str__(self) -> str:
        return self.to_line()


@dataclass(frozen=True, slots=True)
class Course:
    """
    Ein Kurs mit Lehrer und Teilnehmern.
    teacher_id und student_ids sind nur Zahlen, es gibt keine Prüfung gegen
    die vorhandenen Lehrer oder Studenten.
    """
    TAG: ClassVar[str] = "course"

    id: int
    name: str
    teacher_id: int
    student_ids: Tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "student_ids", tuple(self.student_ids))

    def to_line(self) -> str:
        """Textzeile: course <id> <name> <lehrer> <studenten>"""
        return f"{self.TAG} {self.id} {self.name} {self.teacher_id} {_join_ids(self.student_ids)}"

    def __str__(self) -> str:
        return self.to_line()


# Alle Datensätze, die in einer Datei vorkommen können.
Record = Union[Student, Teacher, Course]
