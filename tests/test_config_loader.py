"""
Testy dla ConfigLoader.

Testuje:
- Wczytywanie presetów z data/
- Uzupełnianie defaults (hero_defaults, basic_attack)
- Błędy dla nieznanych presetów i brakujących plików
"""

import pytest
import sys
import yaml
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from arena.core.config_loader import ConfigLoader
from arena.events import MemoryLogger
from arena.heroes import Hero, HeroFactory


DATA_PATH = Path(__file__).parent.parent / "data"


# ═══════════════════════════════════════════════════════════════════════════
# FIXTURES
# ═══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def loader():
    return ConfigLoader(str(DATA_PATH))


@pytest.fixture
def custom_data(tmp_path):
    """Własny folder data/ z nadpisanymi defaults."""
    (tmp_path / "defaults.yaml").write_text(yaml.safe_dump({
        "hero_defaults": {"attack_damage": 5},
        "basic_attack": {"name": "Punch", "damage": 3, "range": 1},
    }), encoding="utf-8")
    (tmp_path / "heroes.yaml").write_text(yaml.safe_dump({
        "heroes": {
            "brawler": {
                "name": "Brawler",
                "abilities": [{"type": "basic"}, {"type": "basic", "damage": 7}],
            },
            "knight": {
                "name": "Knight",
                "attack_damage": 9,
                "abilities": [{"type": "weapon", "name": "Lance", "multiplier": 2}],
            },
        }
    }, sort_keys=False), encoding="utf-8")
    return tmp_path


# ═══════════════════════════════════════════════════════════════════════════
# TEST: DOMYŚLNE DANE
# ═══════════════════════════════════════════════════════════════════════════

def test_hero_ids(loader):
    assert loader.get_hero_ids() == ["sword_hero", "fire_hero", "freeze_hero"]


def test_load_sword_hero(loader):
    data = loader.load_hero("sword_hero")

    assert data["id"] == "sword_hero"
    assert data["name"] == "Sword Hero"
    assert data["attack_damage"] == 0
    assert data["abilities"][0] == {
        "type": "basic", "name": "Basic Attack", "damage": 10, "range": 1,
    }
    assert data["abilities"][1]["multiplier"] == 2


def test_load_unknown_hero(loader):
    with pytest.raises(KeyError):
        loader.load_hero("ninja_hero")


def test_config_presets_match_factory(loader):
    """Presety z YAML dają te same umiejętności co HeroFactory."""
    logger = MemoryLogger()
    for hero_id in loader.get_hero_ids():
        from_yaml = HeroFactory.from_config(loader.load_hero(hero_id), logger)
        from_code = HeroFactory.create(hero_id, from_yaml.name, logger)
        assert from_yaml.abilities == from_code.abilities
        assert from_yaml.attack_damage == from_code.attack_damage


# ═══════════════════════════════════════════════════════════════════════════
# TEST: MERGE DEFAULTS
# ═══════════════════════════════════════════════════════════════════════════

def test_hero_defaults_applied(custom_data):
    loader = ConfigLoader(str(custom_data))

    assert loader.load_hero("brawler")["attack_damage"] == 5
    assert loader.load_hero("knight")["attack_damage"] == 9


def test_basic_ability_defaults_applied(custom_data):
    loader = ConfigLoader(str(custom_data))
    abilities = loader.load_hero("brawler")["abilities"]

    assert abilities[0]["name"] == "Punch"
    assert abilities[0]["damage"] == 3
    assert abilities[1]["damage"] == 7  # nadpisane w presecie


def test_non_basic_abilities_untouched(custom_data):
    loader = ConfigLoader(str(custom_data))
    abilities = loader.load_hero("knight")["abilities"]

    assert abilities == [{"type": "weapon", "name": "Lance", "multiplier": 2}]


def test_load_hero_returns_copy(custom_data):
    """Modyfikacja wyniku nie psuje cache."""
    loader = ConfigLoader(str(custom_data))
    loader.load_hero("brawler")["abilities"].clear()

    assert len(loader.load_hero("brawler")["abilities"]) == 2


def test_reload_picks_up_changes(custom_data):
    loader = ConfigLoader(str(custom_data))
    assert loader.get_hero_ids() == ["brawler", "knight"]

    (custom_data / "heroes.yaml").write_text(
        yaml.safe_dump({"heroes": {"solo": {"name": "Solo"}}}), encoding="utf-8"
    )
    loader.reload()

    assert loader.get_hero_ids() == ["solo"]
    assert loader.load_hero("solo")["abilities"] == []


def test_empty_preset_mapping(tmp_path):
    """Preset bez pól (pusty mapping w YAML) dostaje same defaults."""
    (tmp_path / "defaults.yaml").write_text(
        yaml.safe_dump({"hero_defaults": {"attack_damage": 0}}), encoding="utf-8"
    )
    (tmp_path / "heroes.yaml").write_text("heroes:\n  plain:\n", encoding="utf-8")
    loader = ConfigLoader(str(tmp_path))

    data = loader.load_hero("plain")

    assert data["name"] == "plain"
    assert data["attack_damage"] == 0
    assert data["abilities"] == []


def test_missing_files(tmp_path):
    loader = ConfigLoader(str(tmp_path))
    with pytest.raises(FileNotFoundError):
        loader.get_hero_ids()


def test_hero_from_custom_config(custom_data):
    loader = ConfigLoader(str(custom_data))
    logger = MemoryLogger()
    knight = HeroFactory.from_config(loader.load_hero("knight"), logger)

    knight.attack(Hero("Dummy", [], logger))

    assert logger.lines[-1] == "Dummy takes 18 damage from Knight"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
