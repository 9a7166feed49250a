"""
Testy scenariusza walki (end-to-end).

Testuje:
- Pełną sekwencję logów trzech ataków
- Determinizm (dwa uruchomienia = identyczny log)
- Obsadę z YAML
- Entry point main.py
"""

import pytest
import subprocess
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from arena.core.config_loader import ConfigLoader
from arena.events import MemoryLogger
from arena.simulation import Scenario, run_default_scenario, DEFAULT_MATCHUPS
import main


DATA_PATH = Path(__file__).parent.parent / "data"
MAIN_PATH = Path(__file__).parent.parent / "main.py"

EXPECTED_LOG = [
    # Sword -> Fire
    "Sword Hero is attacking Fire Hero",
    "Sword Hero uses Basic Attack on Fire Hero",
    "Fire Hero takes 10 damage from Sword Hero",
    "Sword Hero uses Sword Attack on Fire Hero",
    "Fire Hero takes 0 damage from Sword Hero",
    # Fire -> Freeze
    "Fire Hero is attacking Freeze Hero",
    "Fire Hero uses Basic Attack on Freeze Hero",
    "Freeze Hero takes 10 damage from Fire Hero",
    "Fire Hero uses Fire Attack on Freeze Hero",
    "Freeze Hero takes 0 damage from Fire Hero",
    "Freeze Hero is burning for 3 seconds",
    # Freeze -> Sword
    "Freeze Hero is attacking Sword Hero",
    "Freeze Hero uses Basic Attack on Sword Hero",
    "Sword Hero takes 10 damage from Freeze Hero",
    "Freeze Hero uses Freeze Attack on Sword Hero",
    "Sword Hero takes 0 damage from Freeze Hero",
    "Freezing Sword Hero with Blue ice",
    "Cooldown time: 4 seconds",
]


# ═══════════════════════════════════════════════════════════════════════════
# TEST: DOMYŚLNY SCENARIUSZ
# ═══════════════════════════════════════════════════════════════════════════

def test_default_scenario_log():
    logger = MemoryLogger()

    result = run_default_scenario(logger)

    assert logger.lines == EXPECTED_LOG
    assert result.attacks == 3
    assert set(result.heroes.keys()) == {"sword_hero", "fire_hero", "freeze_hero"}


def test_first_attack_prefix():
    """Sword -> Fire zaczyna się od ogłoszenia i ataku podstawowego."""
    logger = MemoryLogger()
    run_default_scenario(logger)

    assert logger.lines[:3] == [
        "Sword Hero is attacking Fire Hero",
        "Sword Hero uses Basic Attack on Fire Hero",
        "Fire Hero takes 10 damage from Sword Hero",
    ]


def test_scenario_is_deterministic():
    first, second = MemoryLogger(), MemoryLogger()

    run_default_scenario(first)
    run_default_scenario(second)

    assert first.lines == second.lines


def test_scenario_from_yaml_matches_builtin():
    logger = MemoryLogger()

    Scenario(logger, loader=ConfigLoader(str(DATA_PATH))).run()

    assert logger.lines == EXPECTED_LOG


def test_custom_matchups():
    logger = MemoryLogger()

    result = Scenario(logger, matchups=[("fire_hero", "sword_hero")]).run()

    assert result.attacks == 1
    assert logger.lines[0] == "Fire Hero is attacking Sword Hero"
    assert logger.lines[-1] == "Sword Hero is burning for 3 seconds"


def test_empty_matchups_run_no_attacks():
    """Pusta lista par = zero ataków, pusty log."""
    logger = MemoryLogger()

    result = Scenario(logger, matchups=[]).run()

    assert result.attacks == 0
    assert logger.lines == []
    assert len(result.heroes) == 3


def test_unknown_matchup_raises():
    with pytest.raises(KeyError):
        Scenario(MemoryLogger(), matchups=[("sword_hero", "ghost")]).run()


def test_default_matchups_order():
    assert DEFAULT_MATCHUPS == [
        ("sword_hero", "fire_hero"),
        ("fire_hero", "freeze_hero"),
        ("freeze_hero", "sword_hero"),
    ]


# ═══════════════════════════════════════════════════════════════════════════
# TEST: ENTRY POINT
# ═══════════════════════════════════════════════════════════════════════════

def test_main_prints_log(capsys):
    assert main.main([]) == 0

    out = capsys.readouterr().out
    assert out == "\n".join(EXPECTED_LOG) + "\n"


def test_main_output_identical_across_processes():
    """Dwa osobne procesy dają bajtowo identyczny output."""
    runs = [
        subprocess.run(
            [sys.executable, str(MAIN_PATH)],
            capture_output=True,
            check=True,
            cwd=str(MAIN_PATH.parent),
        )
        for _ in range(2)
    ]

    assert runs[0].stdout == runs[1].stdout
    assert runs[0].stdout.decode("utf-8").splitlines() == EXPECTED_LOG
    assert all(r.returncode == 0 for r in runs)


def test_main_with_data_and_save(tmp_path, capsys):
    out_file = tmp_path / "battle.json"

    main.main(["--data", str(DATA_PATH), "--save", str(out_file)])

    assert capsys.readouterr().out.splitlines() == EXPECTED_LOG
    assert out_file.exists()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
