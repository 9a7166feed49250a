#!/usr/bin/env python3
"""
Hero Arena - Entry Point
═══════════════════════════════════════════════════════════════════════════

Tworzy trzech bohaterów i wykonuje trzy ataki:
Sword -> Fire, Fire -> Freeze, Freeze -> Sword.

Użycie:
    python main.py                          # Domyślna obsada
    python main.py --data data/             # Obsada z plików YAML
    python main.py --save output/log.json   # Dodatkowo zapisz log JSON

Wynik:
    - Wypisuje przebieg walki na konsolę (linia po linii)
    - Opcjonalnie zapisuje log do pliku JSON
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from arena.core.config_loader import ConfigLoader
from arena.events.event_logger import ConsoleLogger, EventLogger, MultiLogger
from arena.simulation.scenario import Scenario


def main(argv=None):
    """Główna funkcja."""
    parser = argparse.ArgumentParser(
        description="Hero Arena - combat log demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--data",
        default=None,
        help="Folder z defaults.yaml i heroes.yaml (domyślnie: wbudowane presety)"
    )
    parser.add_argument(
        "--save",
        default=None,
        help="Zapisz log zdarzeń do pliku JSON"
    )

    args = parser.parse_args(argv)

    loader = ConfigLoader(args.data) if args.data else None

    events = EventLogger()
    logger = MultiLogger(ConsoleLogger(), events)

    Scenario(logger, loader=loader).run()

    if args.save:
        events.save(args.save)
        print(f"Log zapisany: {args.save}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
