"""
Core module - wczytywanie konfiguracji.

Zawiera:
- ConfigLoader: Presety bohaterów z YAML z uzupełnianiem defaults
"""

from .config_loader import ConfigLoader

__all__ = ["ConfigLoader"]
