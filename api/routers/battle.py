"""
Battle router - uruchamianie ataków i scenariusza.

Każdy request dostaje własnych bohaterów i własny MemoryLogger.
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import List, Dict, Any, Optional

from arena.events.event_logger import MemoryLogger
from arena.heroes.factory import HeroFactory
from arena.simulation.scenario import Scenario
from api.routers.heroes import _loader


router = APIRouter()


# ═══════════════════════════════════════════════════════════════════════════
# REQUEST/RESPONSE MODELS
# ═══════════════════════════════════════════════════════════════════════════

class AttackRequest(BaseModel):
    """Request do pojedynczego ataku."""
    attacker: str  # preset id
    target: str    # preset id
    attack_damage: Optional[int] = None  # nadpisuje attack_damage atakującego


class BattleLog(BaseModel):
    """Linie logu w kolejności."""
    lines: List[str]
    total_lines: int


# ═══════════════════════════════════════════════════════════════════════════
# ENDPOINTS
# ═══════════════════════════════════════════════════════════════════════════

@router.post("/attack")
async def run_attack(request: AttackRequest) -> Dict[str, Any]:
    """
    Wykonuje jeden atak między świeżymi bohaterami z presetów.

    Returns:
        Log ataku oraz snapshot obu bohaterów
    """
    logger = MemoryLogger()

    try:
        attacker = HeroFactory.from_config(_loader.load_hero(request.attacker), logger)
        target = HeroFactory.from_config(_loader.load_hero(request.target), logger)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e.args[0]))

    if request.attack_damage is not None:
        attacker.attack_damage = request.attack_damage

    attacker.attack(target)

    return {
        "attacker": attacker.to_dict(),
        "target": target.to_dict(),
        "lines": logger.lines,
        "total_lines": len(logger.lines),
    }


@router.post("/scenario", response_model=BattleLog)
async def run_scenario() -> BattleLog:
    """
    Uruchamia domyślny scenariusz: Sword -> Fire, Fire -> Freeze, Freeze -> Sword.
    """
    logger = MemoryLogger()
    Scenario(logger, loader=_loader).run()
    return BattleLog(lines=logger.lines, total_lines=len(logger.lines))
