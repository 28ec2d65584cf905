from fastapi import APIRouter, Depends

from swplanets.core.dependencies import get_discovery_engine
from swplanets.models.planet import Planet
from swplanets.services.discovery import DiscoveryEngine

router = APIRouter(prefix="/api", tags=["discovery"])


@router.get("/random", response_model=Planet)
async def get_random_planet(engine: DiscoveryEngine = Depends(get_discovery_engine)) -> Planet:
    """A random catalog planet not yet handed out, or at least not a favourite."""
    return await engine.discover()
