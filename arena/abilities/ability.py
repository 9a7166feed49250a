"""
System umiejętności bohaterów.

Każda umiejętność to jeden krok ataku: liczy obrażenia, zadaje je
celowi przez Hero.take_damage() i wypisuje linie do loggera.
Bohater ma listę umiejętności - atak to wywołanie wszystkich po kolei.

TYPY UMIEJĘTNOŚCI:
═══════════════════════════════════════════════════════════════════

    basic    - Stałe obrażenia (np. 10), niezależne od attack_damage
    weapon   - attack_damage × multiplier
    burn     - attack_damage + informacja o czasie podpalenia
    freeze   - attack_damage + kolor lodu i cooldown

KOLEJNOŚĆ LOGÓW (każdy typ):
═══════════════════════════════════════════════════════════════════

    1. "<user> uses <ability> on <target>"
    2. target.take_damage(...)  -> "<target> takes <n> damage from <user>"
    3. Konsekwencje (burn / freeze / cooldown)

UŻYCIE W YAML:
═══════════════════════════════════════════════════════════════════

    abilities:
      - type: "basic"
      - type: "weapon"
        name: "Sword Attack"
        multiplier: 2
      - type: "freeze"
        name: "Freeze Attack"
        color: "blue"
        cooldown: 4
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..events.event_logger import CombatLogger
    from ..heroes.hero import Hero


# Wspólny "Basic Attack" wszystkich presetów
BASIC_ATTACK_NAME = "Basic Attack"
BASIC_ATTACK_DAMAGE = 10
BASIC_ATTACK_RANGE = 1


# ═══════════════════════════════════════════════════════════════════════════
# ENUMS
# ═══════════════════════════════════════════════════════════════════════════

class IceColor(Enum):
    """Kolor lodu - czysto opisowy, nie wpływa na obrażenia."""
    WHITE = "White"
    BLUE = "Blue"
    GREEN = "Green"
    YELLOW = "Yellow"
    RED = "Red"

    @classmethod
    def parse(cls, value: Any) -> "IceColor":
        """
        Zamienia wartość z YAML ("blue", "Blue", "BLUE") na enum.

        Raises:
            ValueError: Jeśli kolor nie należy do zbioru
        """
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).upper()]
        except KeyError:
            raise ValueError(
                f"Unknown ice color: {value}. "
                f"Available: {[c.value for c in cls]}"
            ) from None

    def __str__(self) -> str:
        return self.value


# ═══════════════════════════════════════════════════════════════════════════
# BASE ABILITY
# ═══════════════════════════════════════════════════════════════════════════

class Ability(ABC):
    """
    Bazowa klasa dla wszystkich umiejętności.

    Podklasy są zamrożonymi dataclassami z polami `name` i `logger`.
    """

    ability_type: ClassVar[str] = "base"

    name: str
    logger: "CombatLogger"

    @abstractmethod
    def use(self, user: "Hero", target: "Hero") -> None:
        """
        Używa umiejętności na celu.

        Args:
            user: Bohater używający umiejętności
            target: Cel
        """
        pass

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any], logger: "CombatLogger") -> "Ability":
        """Tworzy umiejętność z YAML dict."""
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Serializuje umiejętność do dict."""
        pass

    def _announce(self, user: "Hero", target: "Hero") -> None:
        self.logger.log(f"{user.name} uses {self.name} on {target.name}")


# ═══════════════════════════════════════════════════════════════════════════
# BASIC ABILITY
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class BasicAbility(Ability):
    """
    Podstawowy atak - stałe obrażenia.

    Attributes:
        name: Nazwa wyświetlana
        logger: Sink dla linii logu
        damage: Obrażenia (nie skalują się z attack_damage)
        range: Zasięg (opisowy, nie ma siatki)
    """
    ability_type: ClassVar[str] = "basic"

    name: str
    logger: "CombatLogger" = field(compare=False, repr=False)
    damage: int = BASIC_ATTACK_DAMAGE
    range: int = BASIC_ATTACK_RANGE

    def use(self, user: "Hero", target: "Hero") -> None:
        self._announce(user, target)
        target.take_damage(self.damage, user)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], logger: "CombatLogger") -> "BasicAbility":
        return cls(
            name=data.get("name", BASIC_ATTACK_NAME),
            logger=logger,
            damage=data.get("damage", BASIC_ATTACK_DAMAGE),
            range=data.get("range", BASIC_ATTACK_RANGE),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.ability_type,
            "name": self.name,
            "damage": self.damage,
            "range": self.range,
        }


# ═══════════════════════════════════════════════════════════════════════════
# WEAPON ABILITY
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class WeaponAbility(Ability):
    """
    Atak bronią - obrażenia = user.attack_damage × multiplier.

    Wartość liczona przy każdym użyciu, więc zmiana attack_damage
    bohatera między atakami od razu zmienia obrażenia.
    """
    ability_type: ClassVar[str] = "weapon"

    name: str
    logger: "CombatLogger" = field(compare=False, repr=False)
    multiplier: int = 2

    def use(self, user: "Hero", target: "Hero") -> None:
        self._announce(user, target)
        target.take_damage(user.attack_damage * self.multiplier, user)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], logger: "CombatLogger") -> "WeaponAbility":
        return cls(
            name=data.get("name", "Weapon Attack"),
            logger=logger,
            multiplier=data.get("multiplier", 2),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.ability_type,
            "name": self.name,
            "multiplier": self.multiplier,
        }


# ═══════════════════════════════════════════════════════════════════════════
# BURN ABILITY
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class BurnAbility(Ability):
    """
    Podpalenie - płaskie obrażenia równe attack_damage.

    Attributes:
        duration: Czas palenia w sekundach (tylko w logu)
    """
    ability_type: ClassVar[str] = "burn"

    name: str
    logger: "CombatLogger" = field(compare=False, repr=False)
    duration: int = 3

    def use(self, user: "Hero", target: "Hero") -> None:
        self._announce(user, target)
        target.take_damage(user.attack_damage, user)
        self.logger.log(f"{target.name} is burning for {self.duration} seconds")

    @classmethod
    def from_dict(cls, data: Dict[str, Any], logger: "CombatLogger") -> "BurnAbility":
        return cls(
            name=data.get("name", "Fire Attack"),
            logger=logger,
            duration=data.get("duration", 3),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.ability_type,
            "name": self.name,
            "duration": self.duration,
        }


# ═══════════════════════════════════════════════════════════════════════════
# FREEZE ABILITY
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class FreezeAbility(Ability):
    """
    Zamrożenie - płaskie obrażenia równe attack_damage.

    Attributes:
        color: Kolor lodu
        cooldown: Czas odnowienia w sekundach (tylko w logu)
    """
    ability_type: ClassVar[str] = "freeze"

    name: str
    logger: "CombatLogger" = field(compare=False, repr=False)
    color: IceColor = IceColor.BLUE
    cooldown: int = 4

    def use(self, user: "Hero", target: "Hero") -> None:
        self._announce(user, target)
        target.take_damage(user.attack_damage, user)
        self.logger.log(f"Freezing {target.name} with {self.color} ice")
        self.logger.log(f"Cooldown time: {self.cooldown} seconds")

    @classmethod
    def from_dict(cls, data: Dict[str, Any], logger: "CombatLogger") -> "FreezeAbility":
        return cls(
            name=data.get("name", "Freeze Attack"),
            logger=logger,
            color=IceColor.parse(data.get("color", "blue")),
            cooldown=data.get("cooldown", 4),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.ability_type,
            "name": self.name,
            "color": self.color.value,
            "cooldown": self.cooldown,
        }


# ═══════════════════════════════════════════════════════════════════════════
# REGISTRY
# ═══════════════════════════════════════════════════════════════════════════

ABILITY_REGISTRY: Dict[str, type] = {
    "basic": BasicAbility,
    "weapon": WeaponAbility,
    "burn": BurnAbility,
    "freeze": FreezeAbility,
}


def create_ability(
    ability_type: str,
    data: Dict[str, Any],
    logger: "CombatLogger",
) -> Ability:
    """
    Factory do tworzenia umiejętności z YAML.

    Args:
        ability_type: Typ umiejętności
        data: Dane z YAML
        logger: Logger przekazywany do umiejętności

    Returns:
        Ability: Instancja umiejętności

    Raises:
        ValueError: Jeśli typ jest nieznany
    """
    ability_class = ABILITY_REGISTRY.get(ability_type)

    if ability_class is None:
        raise ValueError(f"Unknown ability type: {ability_type}. "
                         f"Available: {list(ABILITY_REGISTRY.keys())}")

    return ability_class.from_dict(data, logger)


def parse_abilities(
    abilities_data: Optional[List[Dict[str, Any]]],
    logger: "CombatLogger",
) -> List[Ability]:
    """
    Parsuje listę umiejętności z YAML, zachowując kolejność.

    Args:
        abilities_data: Lista słowników z kluczem "type"
        logger: Logger przekazywany do każdej umiejętności

    Returns:
        List[Ability]: Umiejętności w kolejności z pliku
    """
    abilities = []
    for ability_data in abilities_data or []:
        ability_type = ability_data.get("type", "basic")
        abilities.append(create_ability(ability_type, ability_data, logger))
    return abilities
