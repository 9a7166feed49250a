"""
Heroes router - lista dostępnych presetów.
"""

from fastapi import APIRouter, HTTPException
from typing import List, Dict, Any
from pathlib import Path

from arena.core.config_loader import ConfigLoader


router = APIRouter()

# Initialize config loader
DATA_PATH = Path(__file__).parent.parent.parent / "data"
_loader = ConfigLoader(str(DATA_PATH))


def _hero_info(hero_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": hero_id,
        "name": data.get("name", hero_id),
        "attack_damage": data.get("attack_damage", 0),
        "abilities": data.get("abilities", []),
    }


@router.get("/heroes")
async def get_heroes() -> List[Dict[str, Any]]:
    """
    Zwraca listę wszystkich presetów bohaterów.

    Returns:
        Lista bohaterów z ich umiejętnościami (w kolejności wykonania).
    """
    heroes_data = _loader.load_all_heroes()
    return [_hero_info(hero_id, data) for hero_id, data in heroes_data.items()]


@router.get("/heroes/{hero_id}")
async def get_hero(hero_id: str) -> Dict[str, Any]:
    """
    Zwraca szczegóły presetu.

    Args:
        hero_id: ID presetu
    """
    try:
        data = _loader.load_hero(hero_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Hero '{hero_id}' not found")
    return _hero_info(hero_id, data)
