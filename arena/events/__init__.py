"""
Events module - logowanie zdarzeń walki.

Zawiera:
- CombatLogger: Kontrakt loggera (jedna operacja: log)
- ConsoleLogger, MemoryLogger, MultiLogger: Proste sinki
- CombatEvent, EventLogger: Numerowany log z zapisem do JSON
"""

from .event_logger import (
    CombatLogger, ConsoleLogger, MemoryLogger, MultiLogger,
    CombatEvent, EventLogger,
)

__all__ = [
    "CombatLogger", "ConsoleLogger", "MemoryLogger", "MultiLogger",
    "CombatEvent", "EventLogger",
]
