"""
Entry point für die Kursverwaltung.
Dieses Modul zeigt Speichern und Laden an Beispieldaten.
"""

from __future__ import annotations

import logging
import sys

from .config import KursverwaltungConfig
from .domain import Course, Student, Teacher
from .persistence import DataManager, FileStorage
from .view import ConsoleView


def erzeuge_beispieldaten(manager: DataManager) -> None:
    """Zwei Studenten, ein Lehrer, ein Kurs."""
    manager.add(Student(id=1, name="John Doe", course_ids=[1, 2]))
    manager.add(Student(id=2, name="Alice Smith", course_ids=[1]))
    manager.add(Teacher(id=1, name="Mr. Smith", experience=10, course_ids=[1]))
    manager.add(Course(id=1, name="Math 101", teacher_id=1, student_ids=[1, 2]))


def main() -> None:
    """
    Startpunkt der Anwendung.
    Ablauf:
    - Konfiguration lesen
    - Beispieldaten speichern
    - In einen neuen DataManager laden
    - Geladene Daten ausgeben
    """
    view = ConsoleView()

    try:
        cfg = KursverwaltungConfig.from_env()
        logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")

        storage = FileStorage(encoding=cfg.encoding, atomic=cfg.atomic_save)
        data_path = cfg.daten_pfad()

        manager = DataManager(storage)
        erzeuge_beispieldaten(manager)
        manager.save(data_path)
        view.show_message(f"Daten gespeichert in Datei: {data_path}")

        # Neuer Manager, damit nur die Dateidaten angezeigt werden.
        geladen = DataManager(storage)
        geladen.load(data_path)
        view.render(geladen)

    except KeyboardInterrupt:
        print("\nAnwendung beendet.")
        sys.exit(0)

    except (OSError, ValueError) as e:
        # auch KursdatenFehler und UnicodeDecodeError
        print(f"\nFEHLER: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
