"""
Persistence layer (Textdatei)

Eine Zeile pro Datensatz, kein Kopf und kein Ende.
- FileStorage: Dateizugriff (lesen / schreiben)
- DataManager: hält Studenten, Lehrer und Kurse und speichert / lädt sie

Beim Laden entscheidet das erste Wort der Zeile über die Fabrik.
Unbekannte Kennzeichen werden übersprungen.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from .domain import Course, Record, Student, Teacher
from .errors import KursdatenFehler
from .factory import parse_line, split_line

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileStorage:
    """
    Klasse für Dateihandling beim Laden und Speichern.
    - Nur lesen/schreiben.
    - Dateien werden immer wieder geschlossen, auch bei Fehlern.
    - atomic=True schreibt erst in eine temporäre Datei im selben Ordner.
    """

    def __init__(self, encoding: str = "utf-8", atomic: bool = False) -> None:
        self.encoding = encoding
        self.atomic = atomic

    def lese_zeilen(self, pfad: PathLike) -> List[str]:
        """
        Liest alle Zeilen ohne Zeilenende.
        Nur LF trennt Zeilen, ein CR davor wird entfernt.
        Leerzeichen am Zeilenende bleiben erhalten.
        FileNotFoundError, wenn die Datei fehlt.
        """
        with open(pfad, "r", encoding=self.encoding, newline="\n") as f:
            return [line.rstrip("\r\n") for line in f]

    def schreibe_zeilen(self, pfad: PathLike, zeilen: Iterable[str]) -> None:
        """Schreibt jede Zeile mit Zeilenende. Vorhandener Inhalt wird ersetzt."""
        if self.atomic:
            self._schreibe_atomar(Path(pfad), zeilen)
            return

        with open(pfad, "w", encoding=self.encoding, newline="\n") as f:
            for zeile in zeilen:
                f.write(zeile + "\n")

    def _schreibe_atomar(self, pfad: Path, zeilen: Iterable[str]) -> None:
        tmp_fd, tmp_pfad_str = tempfile.mkstemp(
            prefix=f".{pfad.name}.", suffix=".tmp", dir=pfad.parent
        )
        tmp_pfad = Path(tmp_pfad_str)
        try:
            with os.fdopen(tmp_fd, "w", encoding=self.encoding, newline="\n") as f:
                for zeile in zeilen:
                    f.write(zeile + "\n")
            os.replace(tmp_pfad, pfad)
        except BaseException:
            tmp_pfad.unlink(missing_ok=True)
            raise


class DataManager:
    """
    Verwaltet die drei Sammlungen.
    - students, teachers, courses: Listen in Einfügereihenfolge
    - Doppelte IDs werden nicht zusammengeführt.
    - Mehrfaches Laden hängt immer an.
    """

    def __init__(self, storage: Optional[FileStorage] = None) -> None:
        self._storage = storage or FileStorage()
        self.students: List[Student] = []
        self.teachers: List[Teacher] = []
        self.courses: List[Course] = []

    def _sammlungen(self) -> Dict[str, list]:
        """Kennzeichen -> passende Sammlung."""
        return {
            Student.TAG: self.students,
            Teacher.TAG: self.teachers,
            Course.TAG: self.courses,
        }

    def add(self, record: Record) -> None:
        """Hängt einen Datensatz an die Sammlung seines Typs an."""
        self._sammlungen()[record.TAG].append(record)

    def clear(self) -> None:
        """Leert alle Sammlungen."""
        self.students.clear()
        self.teachers.clear()
        self.courses.clear()

    def __len__(self) -> int:
        return len(self.students) + len(self.teachers) + len(self.courses)

    def zeilen(self) -> List[str]:
        """Alle Datensätze als Zeilen: erst Studenten, dann Lehrer, dann Kurse."""
        records: List[Record] = [*self.students, *self.teachers, *self.courses]
        return [r.to_line() for r in records]

    def save(self, pfad: PathLike) -> None:
        """
        Schreibt alle Datensätze in die Datei.
        Die Datei wird überschrieben.
        """
        self._storage.schreibe_zeilen(pfad, self.zeilen())
        logger.info(
            "Gespeichert: %d Studenten, %d Lehrer, %d Kurse -> %s",
            len(self.students), len(self.teachers), len(self.courses), pfad,
        )

    def load(self, pfad: PathLike) -> None:
        """
        Liest die Datei und hängt die Datensätze an.
        - Zeile mit bekanntem Kennzeichen -> Fabrik -> passende Sammlung
        - Unbekanntes Kennzeichen -> überspringen
        FormatError / ConversionError bekommen die Zeilennummer.
        """
        sammlungen = self._sammlungen()
        geladen = 0

        for nummer, zeile in enumerate(self._storage.lese_zeilen(pfad), start=1):
            try:
                record = parse_line(zeile)
            except KursdatenFehler as e:
                e.mit_zeile(nummer)
                raise

            if record is None:
                logger.debug("Zeile %d übersprungen, unbekanntes Kennzeichen %r", nummer, split_line(zeile)[0])
                continue

            sammlungen[record.TAG].append(record)
            geladen += 1

        logger.info("Geladen: %d Datensätze aus %s", geladen, pfad)
