"""
Loader konfiguracji z automatycznym uzupełnianiem wartości domyślnych.

Presety bohaterów są opisane w plikach YAML:
- defaults.yaml: wartości bazowe bohatera i wspólny "Basic Attack"
- heroes.yaml: definicje presetów (nazwa, attack_damage, umiejętności)

Logika merge (uzupełniania defaults):
    1. Wczytaj defaults.yaml
    2. Wczytaj konkretny preset (np. "sword_hero")
    3. Brakujące klucze bohatera bierz z hero_defaults
    4. Umiejętność "basic" bez pól dostaje wartości z basic_attack

Przykład:
    defaults.yaml:
        hero_defaults:
            attack_damage: 0
        basic_attack:
            name: "Basic Attack"
            damage: 10

    heroes.yaml:
        heroes:
            sword_hero:
                name: "Sword Hero"
                abilities:
                    - type: "basic"      # -> Basic Attack, 10 dmg
                    - type: "weapon"
                      name: "Sword Attack"
                      multiplier: 2

Użycie:
    >>> loader = ConfigLoader("data/")
    >>> sword = loader.load_hero("sword_hero")
    >>> sword["attack_damage"]  # z defaults
    0
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict, Any, List, Optional
import yaml
import copy


class ConfigLoader:
    """
    Ładuje konfigurację z plików YAML z automatycznym merge defaults.

    Attributes:
        data_path (Path): Ścieżka do folderu data/
        _defaults (Dict): Cache wczytanych defaults
        _heroes (Dict): Cache wczytanych presetów

    Example:
        >>> loader = ConfigLoader("data/")
        >>> loader.get_hero_ids()
        ['sword_hero', 'fire_hero', 'freeze_hero']
    """

    def __init__(self, data_path: str = "data/"):
        """
        Inicjalizuje loader z ścieżką do danych.

        Args:
            data_path: Ścieżka do folderu z plikami YAML
        """
        self.data_path = Path(data_path)
        self._defaults: Optional[Dict] = None
        self._heroes: Optional[Dict] = None

    # ─────────────────────────────────────────────────────────────────────────
    # WCZYTYWANIE PLIKÓW
    # ─────────────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> Dict:
        """
        Wczytuje plik YAML.

        Raises:
            FileNotFoundError: Jeśli plik nie istnieje
        """
        filepath = self.data_path / filename
        with open(filepath, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}

    def get_defaults(self) -> Dict:
        """
        Zwraca słownik z wartościami domyślnymi.

        Cache'uje wczytany plik - kolejne wywołania są szybkie.
        """
        if self._defaults is None:
            self._defaults = self._load_yaml("defaults.yaml")
        return self._defaults

    def get_hero_defaults(self) -> Dict:
        """Zwraca sekcję hero_defaults z defaults.yaml."""
        return self.get_defaults().get("hero_defaults", {})

    def get_basic_attack(self) -> Dict:
        """Zwraca definicję wspólnego ataku podstawowego."""
        return self.get_defaults().get("basic_attack", {})

    # ─────────────────────────────────────────────────────────────────────────
    # ŁADOWANIE BOHATERÓW
    # ─────────────────────────────────────────────────────────────────────────

    def _get_all_heroes_raw(self) -> Dict:
        """Zwraca wszystkie surowe definicje presetów."""
        if self._heroes is None:
            data = self._load_yaml("heroes.yaml")
            self._heroes = data.get("heroes", {})
        return self._heroes

    def load_hero(self, hero_id: str) -> Dict:
        """
        Wczytuje definicję presetu z uzupełnionymi defaults.

        Args:
            hero_id: ID presetu (klucz w heroes.yaml)

        Returns:
            Dict: Pełna definicja bohatera

        Raises:
            KeyError: Jeśli preset nie istnieje
        """
        heroes = self._get_all_heroes_raw()

        if hero_id not in heroes:
            raise KeyError(f"Hero '{hero_id}' not found in heroes.yaml")

        result = copy.deepcopy(self.get_hero_defaults())
        result = self._deep_merge(result, heroes[hero_id] or {})
        result.setdefault("name", hero_id)
        result["abilities"] = [
            self._with_ability_defaults(a) for a in result.get("abilities") or []
        ]
        result["id"] = hero_id

        return result

    def load_all_heroes(self) -> Dict[str, Dict]:
        """
        Wczytuje wszystkie presety.

        Returns:
            Dict[str, Dict]: Mapa hero_id -> definicja
        """
        heroes = self._get_all_heroes_raw()
        return {hid: self.load_hero(hid) for hid in heroes.keys()}

    def get_hero_ids(self) -> List[str]:
        """Zwraca listę ID presetów (w kolejności z pliku)."""
        return list(self._get_all_heroes_raw().keys())

    # ─────────────────────────────────────────────────────────────────────────
    # HELPERY
    # ─────────────────────────────────────────────────────────────────────────

    def _with_ability_defaults(self, ability_data: Dict) -> Dict:
        """Uzupełnia umiejętność "basic" wartościami z basic_attack."""
        if ability_data.get("type", "basic") != "basic":
            return ability_data
        return self._deep_merge(self.get_basic_attack(), ability_data)

    @staticmethod
    def _deep_merge(base: Dict, override: Dict) -> Dict:
        """
        Głęboko łączy dwa słowniki.

        Override nadpisuje wartości w base.
        Nested dicts są merge'owane rekurencyjnie.
        """
        result = copy.deepcopy(base)

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = ConfigLoader._deep_merge(result[key], value)
            else:
                result[key] = copy.deepcopy(value)

        return result

    def reload(self) -> None:
        """
        Czyści cache i wymusza ponowne wczytanie plików.
        """
        self._defaults = None
        self._heroes = None
