"""
Simulation module - scenariusz walki.

Zawiera:
- Scenario: Obsada + stała sekwencja ataków
- ScenarioResult: Wynik uruchomienia
- run_default_scenario: Sword -> Fire, Fire -> Freeze, Freeze -> Sword
"""

from .scenario import (
    Scenario, ScenarioResult, run_default_scenario,
    DEFAULT_CAST, DEFAULT_MATCHUPS,
)

__all__ = [
    "Scenario", "ScenarioResult", "run_default_scenario",
    "DEFAULT_CAST", "DEFAULT_MATCHUPS",
]
