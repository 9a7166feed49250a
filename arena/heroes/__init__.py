"""
Heroes module - bohaterowie i ich presety.

Zawiera:
- Hero: Bohater z listą umiejętności (atak, take_damage)
- HeroFactory: Presety Sword / Fire / Freeze + tworzenie z YAML
"""

from .hero import Hero
from .factory import HeroFactory, PRESETS

__all__ = ["Hero", "HeroFactory", "PRESETS"]
