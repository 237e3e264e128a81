"""
UI layer für die Console

Gibt die geladenen Datensätze aus.
Jeder Datensatz erscheint in seiner Dateizeile.
"""

from __future__ import annotations

from typing import Iterable, List

from .domain import Record
from .persistence import DataManager


class ConsoleView:
    """View für die Konsole."""

    def render(self, manager: DataManager, titel: str = "Geladene Daten:") -> None:
        """Zeichnet alle Sammlungen. Es wird ein String gebaut und dann ausgegeben."""
        print(self._build(manager, titel))

    def show_message(self, text: str) -> None:
        """
        Gibt eine Nachricht aus.
        """
        print(text)

    def _build(self, manager: DataManager, titel: str) -> str:
        zeilen: List[str] = ["", titel]
        zeilen.extend(self._abschnitt(manager.students))
        zeilen.extend(self._abschnitt(manager.teachers))
        zeilen.extend(self._abschnitt(manager.courses))
        return "\n".join(zeilen)

    def _abschnitt(self, records: Iterable[Record]) -> List[str]:
        return [str(r) for r in records]
