"""
System logowania zdarzeń walki.

Każdy bohater i każda umiejętność dostaje referencję do loggera przy
tworzeniu. Logger przyjmuje pojedyncze linie tekstu - nic więcej.

KONTRAKT:
═══════════════════════════════════════════════════════════════════

    CombatLogger.log(message: str) -> None
    ─────────────────────────────────────────────────────────────
    Jedna operacja, brak wartości zwracanej, brak błędów.
    Wywołania są zawsze sekwencyjne (jeden wątek).

IMPLEMENTACJE:
═══════════════════════════════════════════════════════════════════

    ConsoleLogger  - wypisuje linie na stdout (domyślny sink)
    MemoryLogger   - trzyma linie w liście (testy, API)
    EventLogger    - numerowane zdarzenia + zapis do JSON
    MultiLogger    - rozsyła linię do kilku loggerów

FORMAT LOGU (EventLogger):
═══════════════════════════════════════════════════════════════════

{
    "metadata": {
        "version": "1.0",
        "scenario": "default"
    },
    "events": [
        {"index": 0, "message": "Sword Hero is attacking Fire Hero"},
        {"index": 1, "message": "Sword Hero uses Basic Attack on Fire Hero"},
        ...
    ]
}
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, TextIO
import json
import sys
from pathlib import Path


class CombatLogger(ABC):
    """
    Bazowa klasa dla wszystkich loggerów walki.
    """

    @abstractmethod
    def log(self, message: str) -> None:
        """
        Zapisuje jedną linię zdarzenia.

        Args:
            message: Tekst zdarzenia (bez znaku nowej linii)
        """
        pass


class ConsoleLogger(CombatLogger):
    """
    Wypisuje każdą linię na strumień wyjściowy.

    Attributes:
        stream: Strumień docelowy (None = aktualny sys.stdout)
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def log(self, message: str) -> None:
        print(message, file=self.stream if self.stream is not None else sys.stdout)


class MemoryLogger(CombatLogger):
    """Trzyma wszystkie linie w pamięci."""

    def __init__(self):
        self.lines: List[str] = []

    def log(self, message: str) -> None:
        self.lines.append(message)

    def clear(self) -> None:
        self.lines.clear()


class MultiLogger(CombatLogger):
    """
    Rozsyła każdą linię do wszystkich podanych loggerów, w kolejności.

    Example:
        >>> events = EventLogger()
        >>> logger = MultiLogger(ConsoleLogger(), events)
        >>> logger.log("Sword Hero is attacking Fire Hero")
        Sword Hero is attacking Fire Hero
        >>> events.get_event_count()
        1
    """

    def __init__(self, *loggers: CombatLogger):
        self.loggers: List[CombatLogger] = list(loggers)

    def log(self, message: str) -> None:
        for logger in self.loggers:
            logger.log(message)


@dataclass
class CombatEvent:
    """
    Pojedyncze zdarzenie w logu walki.

    Attributes:
        index (int): Numer kolejny zdarzenia (od 0)
        message (str): Tekst zdarzenia
    """
    index: int
    message: str

    def to_dict(self) -> Dict[str, Any]:
        """Serializuje zdarzenie do słownika."""
        return {
            "index": self.index,
            "message": self.message,
        }


class EventLogger(CombatLogger):
    """
    Logger zdarzeń walki z zapisem do JSON.

    Zbiera wszystkie zdarzenia i może je zapisać do pliku.
    Metadane nie zawierają czasu - ten sam scenariusz zawsze
    daje identyczny plik.

    Attributes:
        events (List[CombatEvent]): Lista wszystkich zdarzeń
        metadata (Dict): Metadane logu

    Example:
        >>> logger = EventLogger(scenario="default")
        >>> logger.log("Sword Hero is attacking Fire Hero")
        >>> logger.save("output/battle.json")
    """

    def __init__(self, scenario: str = "default"):
        """
        Inicjalizuje logger.

        Args:
            scenario: Nazwa scenariusza zapisywana w metadanych
        """
        self.events: List[CombatEvent] = []
        self.metadata: Dict[str, Any] = {
            "version": "1.0",
            "scenario": scenario,
        }

    # ─────────────────────────────────────────────────────────────────────────
    # LOGOWANIE
    # ─────────────────────────────────────────────────────────────────────────

    def log(self, message: str) -> None:
        self.events.append(CombatEvent(index=len(self.events), message=message))

    # ─────────────────────────────────────────────────────────────────────────
    # SERIALIZACJA
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        """
        Serializuje cały log do słownika.

        Returns:
            Dict: Pełny log w formacie dla JSON
        """
        return {
            "metadata": self.metadata,
            "events": [e.to_dict() for e in self.events],
        }

    def save(self, filepath: str) -> None:
        """
        Zapisuje log do pliku JSON.

        Args:
            filepath: Ścieżka do pliku
        """
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    def to_json(self, indent: Optional[int] = 2) -> str:
        """
        Zwraca log jako string JSON.

        Args:
            indent: Wcięcie (None = compact)

        Returns:
            str: JSON string
        """
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    # ─────────────────────────────────────────────────────────────────────────
    # STATYSTYKI
    # ─────────────────────────────────────────────────────────────────────────

    def get_event_count(self) -> int:
        """Zwraca liczbę zdarzeń."""
        return len(self.events)

    def get_lines(self) -> List[str]:
        """Zwraca same teksty zdarzeń, w kolejności."""
        return [e.message for e in self.events]

    def get_events_mentioning(self, name: str) -> List[CombatEvent]:
        """Filtruje zdarzenia, w których pada podana nazwa."""
        return [e for e in self.events if name in e.message]
