"""
Hero Arena - minimalna symulacja walki bohaterów.

Moduły:
- abilities: Umiejętności (basic, weapon, burn, freeze)
- heroes: Bohater i presety
- events: Loggery zdarzeń
- core: Konfiguracja z YAML
- simulation: Scenariusz walki
"""

__version__ = "1.0.0"
