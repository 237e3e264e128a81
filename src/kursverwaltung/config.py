"""
Konfiguration für die Kursverwaltung.

Werte kommen aus:
1. Umgebungsvariablen (KURSVERWALTUNG_*)
2. Programmatisch über KursverwaltungConfig(...)

Der Dateiname der Daten ist fest (data.txt im Arbeitsverzeichnis).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

_WAHR = {"1", "true", "yes", "ja", "on"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class KursverwaltungConfig:
    """
    Einstellungen.

    Attributes:
        dateiname: Name der Datendatei
        encoding: Zeichenkodierung der Datei
        log_level: Logging-Level (DEBUG, INFO, WARNING, ERROR)
        atomic_save: Über eine temporäre Datei speichern
    """
    dateiname: str = "data.txt"
    encoding: str = "utf-8"
    log_level: str = "WARNING"
    atomic_save: bool = False

    def __post_init__(self) -> None:
        self.log_level = self.log_level.strip().upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Ungültiges Log-Level: {self.log_level!r}")

    def daten_pfad(self, basis: Optional[Union[str, Path]] = None) -> Path:
        """Pfad der Datendatei. Ohne basis: aktuelles Arbeitsverzeichnis."""
        basis_pfad = Path(basis) if basis is not None else Path.cwd()
        return basis_pfad / self.dateiname

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "KursverwaltungConfig":
        """Liest KURSVERWALTUNG_LOG_LEVEL und KURSVERWALTUNG_ATOMIC_SAVE."""
        if env is None:
            env = os.environ
        werte: Dict[str, Any] = {}
        level = env.get("KURSVERWALTUNG_LOG_LEVEL")
        if level:
            werte["log_level"] = level
        atomic = env.get("KURSVERWALTUNG_ATOMIC_SAVE")
        if atomic is not None:
            werte["atomic_save"] = atomic.strip().lower() in _WAHR
        return cls(**werte)
