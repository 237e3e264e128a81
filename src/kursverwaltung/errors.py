"""
Fehlerklassen für das Lesen der Datendatei.

- FormatError: Zeile hat zu wenige Felder für ihren Typ.
- ConversionError: Ein Zahlenfeld ist keine ganze Zahl.

Beide erben zusätzlich von ValueError.
"""

from __future__ import annotations

from typing import Optional


class KursdatenFehler(Exception):
    """
    Basisklasse für Fehler in den Kursdaten.
    line_number wird beim Laden gesetzt (1-basiert).
    """

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.line_number = line_number

    def mit_zeile(self, line_number: int) -> "KursdatenFehler":
        """Hängt die Zeilennummer an und gibt den Fehler zurück."""
        self.line_number = line_number
        return self

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"Zeile {self.line_number}: {self.message}"


class FormatError(KursdatenFehler, ValueError):
    """Zu wenige Felder in einer Zeile."""

    def __init__(self, tag: str, minimum: int, actual: int) -> None:
        super().__init__(
            f"Ungültiges Format für '{tag}': mindestens {minimum} Felder erwartet, {actual} gefunden."
        )
        self.tag = tag
        self.minimum = minimum
        self.actual = actual


class ConversionError(KursdatenFehler, ValueError):
    """Feld konnte nicht in eine ganze Zahl umgewandelt werden."""

    def __init__(self, feld: str, raw: str) -> None:
        super().__init__(f"Feld '{feld}' ist keine ganze Zahl: {raw!r}")
        self.feld = feld
        self.raw = raw
