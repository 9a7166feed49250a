"""
FastAPI Backend dla Hero Arena.

Endpoints:
    GET  /api/health           - health check
    GET  /api/heroes           - lista presetów bohaterów
    GET  /api/heroes/{id}      - szczegóły presetu
    POST /api/attack           - jeden atak między presetami
    POST /api/scenario         - domyślny scenariusz walki
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from api.routers import heroes, battle


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown events."""
    hero_ids = heroes._loader.get_hero_ids()
    print(f"Hero Arena API: {len(hero_ids)} hero presets ({', '.join(hero_ids)})")
    print(f"Presets loaded from: {heroes.DATA_PATH}")
    yield
    print("Hero Arena API shutting down...")


app = FastAPI(
    title="Hero Arena API",
    description="Backend API for the Hero Arena combat log",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS - allow all origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(heroes.router, prefix="/api", tags=["Heroes"])
app.include_router(battle.router, prefix="/api", tags=["Battle"])


@app.get("/api/health")
async def health():
    """API health check."""
    return {"status": "healthy"}
