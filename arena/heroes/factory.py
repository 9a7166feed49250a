"""
HeroFactory - gotowe konfiguracje bohaterów.

Każdy preset to atak podstawowy + jedna umiejętność specjalna:

    sword_hero   [Basic Attack, Sword Attack (×2)]
    fire_hero    [Basic Attack, Fire Attack (burn 3s)]
    freeze_hero  [Basic Attack, Freeze Attack (Blue, cooldown 4s)]

Każdy bohater dostaje świeże instancje umiejętności - nic nie jest
współdzielone między bohaterami poza loggerem.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, TYPE_CHECKING

from ..abilities.ability import (
    BasicAbility, WeaponAbility, BurnAbility, FreezeAbility, IceColor,
    BASIC_ATTACK_NAME, BASIC_ATTACK_DAMAGE, BASIC_ATTACK_RANGE,
    parse_abilities,
)
from .hero import Hero

if TYPE_CHECKING:
    from ..events.event_logger import CombatLogger


def _basic_attack(logger: "CombatLogger") -> BasicAbility:
    return BasicAbility(
        name=BASIC_ATTACK_NAME,
        logger=logger,
        damage=BASIC_ATTACK_DAMAGE,
        range=BASIC_ATTACK_RANGE,
    )


class HeroFactory:
    """
    Tworzy w pełni skonfigurowanych bohaterów.

    Example:
        >>> logger = ConsoleLogger()
        >>> sword = HeroFactory.create_sword_hero("Sword Hero", logger)
        >>> [a.name for a in sword.abilities]
        ['Basic Attack', 'Sword Attack']
    """

    @staticmethod
    def create_sword_hero(name: str, logger: "CombatLogger") -> Hero:
        abilities = [
            _basic_attack(logger),
            WeaponAbility(name="Sword Attack", logger=logger, multiplier=2),
        ]
        return Hero(name, abilities, logger)

    @staticmethod
    def create_fire_hero(name: str, logger: "CombatLogger") -> Hero:
        abilities = [
            _basic_attack(logger),
            BurnAbility(name="Fire Attack", logger=logger, duration=3),
        ]
        return Hero(name, abilities, logger)

    @staticmethod
    def create_freeze_hero(name: str, logger: "CombatLogger") -> Hero:
        abilities = [
            _basic_attack(logger),
            FreezeAbility(
                name="Freeze Attack",
                logger=logger,
                color=IceColor.BLUE,
                cooldown=4,
            ),
        ]
        return Hero(name, abilities, logger)

    @classmethod
    def create(cls, preset_id: str, name: str, logger: "CombatLogger") -> Hero:
        """
        Tworzy bohatera z presetu po ID.

        Raises:
            KeyError: Jeśli preset nie istnieje
        """
        if preset_id not in PRESETS:
            raise KeyError(f"Unknown hero preset: {preset_id}. "
                           f"Available: {list(PRESETS.keys())}")
        return PRESETS[preset_id](name, logger)

    @staticmethod
    def from_config(hero_data: Dict[str, Any], logger: "CombatLogger") -> Hero:
        """
        Tworzy bohatera z definicji z ConfigLoader.load_hero().

        Args:
            hero_data: Definicja z uzupełnionymi defaults
            logger: Logger dla bohatera i jego umiejętności

        Returns:
            Hero: Nowa instancja
        """
        return Hero(
            name=hero_data.get("name", hero_data.get("id", "Hero")),
            abilities=parse_abilities(hero_data.get("abilities"), logger),
            logger=logger,
            attack_damage=hero_data.get("attack_damage", 0),
        )


PRESETS: Dict[str, Callable[[str, "CombatLogger"], Hero]] = {
    "sword_hero": HeroFactory.create_sword_hero,
    "fire_hero": HeroFactory.create_fire_hero,
    "freeze_hero": HeroFactory.create_freeze_hero,
}
