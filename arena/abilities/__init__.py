"""
Abilities module - system umiejętności.

Zawiera:
- Ability: Bazowa klasa umiejętności
- BasicAbility, WeaponAbility, BurnAbility, FreezeAbility: 4 warianty
- IceColor: Enum kolorów lodu
- ABILITY_REGISTRY, create_ability, parse_abilities: Tworzenie z YAML
"""

from .ability import (
    Ability, IceColor,
    BasicAbility, WeaponAbility, BurnAbility, FreezeAbility,
    BASIC_ATTACK_NAME, BASIC_ATTACK_DAMAGE, BASIC_ATTACK_RANGE,
    ABILITY_REGISTRY, create_ability, parse_abilities,
)

__all__ = [
    "Ability", "IceColor",
    "BasicAbility", "WeaponAbility", "BurnAbility", "FreezeAbility",
    "BASIC_ATTACK_NAME", "BASIC_ATTACK_DAMAGE", "BASIC_ATTACK_RANGE",
    "ABILITY_REGISTRY", "create_ability", "parse_abilities",
]
