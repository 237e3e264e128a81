"""
Fabriken für die Datensätze

Jede Fabrik baut aus einer Textzeile genau einen Datensatz.
Die Zeile ist schon an einzelnen Leerzeichen getrennt (parts), parts[0] ist
das Typ-Kennzeichen.

Der Name steht zwischen der ID und den festen Feldern am Ende.
Er wird über die Position bestimmt und nicht maskiert. Ein Name, dessen
letztes Wort selbst wie eine Zahl oder Zahlenliste aussieht, ist deshalb
nicht eindeutig.

FACTORIES ist eine feste, nicht änderbare Tabelle Kennzeichen -> Fabrik.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from .domain import Course, Record, Student, Teacher
from .errors import ConversionError, FormatError


def split_line(line: str) -> List[str]:
    """
    Trennt eine Zeile an einzelnen Leerzeichen.
    Mehrere Leerzeichen ergeben leere Teile, so bleibt der Name beim
    erneuten Zusammensetzen unverändert.
    """
    return line.split(" ")


# Nur ASCII-Ziffern mit optionalem Minus, wie im Dateiformat geschrieben.
_INT_MUSTER = re.compile(r"-?[0-9]+")


def _parse_int(raw: str, feld: str) -> int:
    """Wandelt ein Feld in int um, sonst ConversionError."""
    if not _INT_MUSTER.fullmatch(raw):
        raise ConversionError(feld, raw)
    return int(raw)


def _parse_ids(raw: str, feld: str) -> Tuple[int, ...]:
    """
    Kommagetrennte ID-Liste.
    Ein leeres Feld ist eine leere Liste.
    """
    if raw == "":
        return ()
    return tuple(_parse_int(teil, feld) for teil in raw.split(","))


def _check_length(parts: Sequence[str], minimum: int) -> None:
    if len(parts) < minimum:
        tag = parts[0] if parts else ""
        raise FormatError(tag, minimum, len(parts))


def parse_student(parts: Sequence[str]) -> Student:
    """student <id> <name...> <kurse>"""
    _check_length(parts, 4)
    return Student(
        id=_parse_int(parts[1], "id"),
        name=" ".join(parts[2:-1]),
        course_ids=_parse_ids(parts[-1], "course_ids"),
    )


def parse_teacher(parts: Sequence[str]) -> Teacher:
    """teacher <id> <name...> <erfahrung> <kurse>"""
    _check_length(parts, 5)
    return Teacher(
        id=_parse_int(parts[1], "id"),
        name=" ".join(parts[2:-2]),
        experience=_parse_int(parts[-2], "experience"),
        course_ids=_parse_ids(parts[-1], "course_ids"),
    )


def parse_course(parts: Sequence[str]) -> Course:
    """course <id> <name...> <lehrer> <studenten>"""
    _check_length(parts, 5)
    return Course(
        id=_parse_int(parts[1], "id"),
        name=" ".join(parts[2:-2]),
        teacher_id=_parse_int(parts[-2], "teacher_id"),
        student_ids=_parse_ids(parts[-1], "student_ids"),
    )


Factory = Callable[[Sequence[str]], Record]

FACTORIES: Mapping[str, Factory] = MappingProxyType({
    Student.TAG: parse_student,
    Teacher.TAG: parse_teacher,
    Course.TAG: parse_course,
})


def parse_line(line: str) -> Optional[Record]:
    """
    Baut einen Datensatz aus einer Zeile.
    Unbekanntes Kennzeichen: None (kein Fehler).
    """
    parts = split_line(line)
    factory = FACTORIES.get(parts[0])
    if factory is None:
        return None
    return factory(parts)
