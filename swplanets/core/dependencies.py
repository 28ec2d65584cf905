from fastapi import Request

from swplanets.services.directory.service import DirectoryService
from swplanets.services.discovery import DiscoveryEngine
from swplanets.services.favourites import FavouritesStore


def get_directory(request: Request) -> DirectoryService:
    return request.app.state.directory


def get_favourites(request: Request) -> FavouritesStore:
    return request.app.state.favourites


def get_discovery_engine(request: Request) -> DiscoveryEngine:
    """Engine over the process-wide stores created at startup."""
    state = request.app.state
    return DiscoveryEngine(
        directory=state.directory,
        seen=state.seen,
        favourites=state.favourites,
        rng=state.rng,
    )
