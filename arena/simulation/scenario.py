"""
Scenariusz walki - stała obsada i stała kolejność ataków.

PRZEBIEG:
═══════════════════════════════════════════════════════════════════

    1. Utwórz trzech bohaterów z presetów:
         Sword Hero, Fire Hero, Freeze Hero
    2. Wykonaj ataki (dokładnie w tej kolejności):
         Sword Hero  -> Fire Hero
         Fire Hero   -> Freeze Hero
         Freeze Hero -> Sword Hero

DETERMINIZM:
═══════════════════════════════════════════════════════════════════

    Brak losowości i czasu - dwa uruchomienia dają identyczny log.

Przykład użycia:
    >>> scenario = Scenario(ConsoleLogger())
    >>> scenario.run()
    Sword Hero is attacking Fire Hero
    ...
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, TYPE_CHECKING

from ..heroes.factory import HeroFactory
from ..heroes.hero import Hero

if TYPE_CHECKING:
    from ..core.config_loader import ConfigLoader
    from ..events.event_logger import CombatLogger


# (preset_id, nazwa) - kolejność tworzenia obsady
DEFAULT_CAST: List[Tuple[str, str]] = [
    ("sword_hero", "Sword Hero"),
    ("fire_hero", "Fire Hero"),
    ("freeze_hero", "Freeze Hero"),
]

# (atakujący, cel) - po preset_id
DEFAULT_MATCHUPS: List[Tuple[str, str]] = [
    ("sword_hero", "fire_hero"),
    ("fire_hero", "freeze_hero"),
    ("freeze_hero", "sword_hero"),
]


@dataclass
class ScenarioResult:
    """
    Wynik scenariusza.

    Attributes:
        heroes (Dict[str, Hero]): Obsada po preset_id
        attacks (int): Liczba wykonanych ataków
    """
    heroes: Dict[str, Hero]
    attacks: int


class Scenario:
    """
    Kompozycja obsady i sekwencji ataków.

    Attributes:
        logger: Logger przekazywany wszystkim bohaterom
        loader: Opcjonalny ConfigLoader - gdy podany, obsada z YAML
        matchups: Lista par (atakujący, cel)
    """

    def __init__(
        self,
        logger: "CombatLogger",
        loader: Optional["ConfigLoader"] = None,
        matchups: Optional[List[Tuple[str, str]]] = None,
    ):
        self.logger = logger
        self.loader = loader
        self.matchups = list(DEFAULT_MATCHUPS if matchups is None else matchups)

    def build_cast(self) -> Dict[str, Hero]:
        """
        Tworzy obsadę.

        Bez loadera używa HeroFactory.create_* z nazwami z DEFAULT_CAST.
        Z loaderem - wszystkich presetów z heroes.yaml.
        """
        if self.loader is None:
            return {
                preset_id: HeroFactory.create(preset_id, name, self.logger)
                for preset_id, name in DEFAULT_CAST
            }

        return {
            hero_id: HeroFactory.from_config(data, self.logger)
            for hero_id, data in self.loader.load_all_heroes().items()
        }

    def run(self) -> ScenarioResult:
        """
        Tworzy obsadę i wykonuje wszystkie ataki po kolei.

        Raises:
            KeyError: Jeśli para odwołuje się do nieznanego bohatera
        """
        heroes = self.build_cast()

        for attacker_id, target_id in self.matchups:
            heroes[attacker_id].attack(heroes[target_id])

        return ScenarioResult(heroes=heroes, attacks=len(self.matchups))


def run_default_scenario(logger: "CombatLogger") -> ScenarioResult:
    """Skrót: domyślna obsada, domyślne ataki."""
    return Scenario(logger).run()
