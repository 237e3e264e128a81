"""
kursverwaltung package

Studenten, Lehrer und Kurse in einer Textdatei speichern und wieder laden.

Schichtenarchitektur:
- domain.py: Entitäten (Student, Teacher, Course)
- errors.py: FormatError / ConversionError
- factory.py: Fabriken pro Typ-Kennzeichen
- persistence.py: Datei-Zugriff + DataManager
- config.py: Einstellungen
- view.py: Konsolen-Ausgabe
- main.py: Einstiegspunkt
"""

from .domain import Course, Record, Student, Teacher
from .errors import ConversionError, FormatError, KursdatenFehler
from .factory import FACTORIES, parse_course, parse_line, parse_student, parse_teacher
from .persistence import DataManager, FileStorage

__all__ = [
    "Course",
    "Record",
    "Student",
    "Teacher",
    "ConversionError",
    "FormatError",
    "KursdatenFehler",
    "FACTORIES",
    "parse_course",
    "parse_line",
    "parse_student",
    "parse_teacher",
    "DataManager",
    "FileStorage",
]
