"""
Hero - bohater biorący udział w walce.

Bohater łączy:
- Nazwę (niezmienna)
- attack_damage - bazową siłę, z której liczą obrażenia umiejętności
- Listę umiejętności (kolejność = kolejność wykonania)
- Logger, przez który raportuje zdarzenia

Przebieg ataku:
═══════════════════════════════════════════════════════════════════

    hero.attack(target)
        1. log: "<hero> is attacking <target>"
        2. dla każdej umiejętności (w kolejności listy):
              ability.use(hero, target)
                 -> target.take_damage(damage, hero)
                 -> log: "<target> takes <damage> damage from <hero>"

Bohater nie ma puli HP - take_damage tylko raportuje trafienie.

Przykład użycia:
    >>> logger = ConsoleLogger()
    >>> hero = Hero("Sword Hero", [BasicAbility("Basic Attack", logger)], logger)
    >>> hero.attack(other)
    Sword Hero is attacking Other
    Sword Hero uses Basic Attack on Other
    Other takes 10 damage from Sword Hero
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, TYPE_CHECKING

if TYPE_CHECKING:
    from ..abilities.ability import Ability
    from ..events.event_logger import CombatLogger


@dataclass(eq=False)
class Hero:
    """
    Reprezentuje bohatera.

    Attributes:
        name (str): Nazwa wyświetlana w logach
        abilities (List[Ability]): Umiejętności w kolejności wykonania
        logger (CombatLogger): Sink dla linii logu
        attack_damage (int): Bazowa siła ataku (domyślnie 0)

    Note:
        - Bohaterowie są porównywani po referencji (eq=False)
        - Pusta lista umiejętności jest dozwolona - atak tylko się ogłasza
    """

    name: str
    abilities: List["Ability"]
    logger: "CombatLogger" = field(repr=False)
    attack_damage: int = 0

    # ─────────────────────────────────────────────────────────────────────────
    # WALKA
    # ─────────────────────────────────────────────────────────────────────────

    def attack(self, target: "Hero") -> None:
        """
        Atakuje cel wszystkimi umiejętnościami, po kolei.

        Args:
            target: Atakowany bohater
        """
        self.logger.log(f"{self.name} is attacking {target.name}")
        for ability in self.abilities:
            ability.use(self, target)

    def take_damage(self, damage: int, attacker: "Hero") -> None:
        """
        Raportuje otrzymane obrażenia.

        Nie zmienia stanu ani celu, ani atakującego.

        Args:
            damage: Wartość obrażeń
            attacker: Kto zadał obrażenia
        """
        self.logger.log(f"{self.name} takes {damage} damage from {attacker.name}")

    # ─────────────────────────────────────────────────────────────────────────
    # KOMPONENTY
    # ─────────────────────────────────────────────────────────────────────────

    def add_ability(self, ability: "Ability") -> None:
        """Dodaje umiejętność na koniec listy."""
        self.abilities.append(ability)

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot bohatera (dla API)."""
        return {
            "name": self.name,
            "attack_damage": self.attack_damage,
            "abilities": [a.to_dict() for a in self.abilities],
        }
