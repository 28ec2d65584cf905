import asyncio

from loguru import logger

from swplanets.core.exceptions import ConflictError, InvalidArgumentError, NotFoundError
from swplanets.models.planet import Planet


def normalize_name(name: str) -> str:
    """Identity key for a favourite: surrounding whitespace and case are ignored."""
    return name.strip().casefold()


class FavouritesStore:
    """
    In-memory favourites, keyed by normalized planet name.

    Lives for the lifetime of the process. Every check-and-act sequence runs
    under one lock so concurrent requests can never insert the same name twice.
    """

    def __init__(self) -> None:
        self._planets: dict[str, Planet] = {}
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._planets)

    async def add(self, planet: Planet) -> Planet:
        if not planet.name or not planet.name.strip():
            raise InvalidArgumentError("Invalid planet name provided")

        key = normalize_name(planet.name)
        async with self._lock:
            if key in self._planets:
                raise ConflictError(f"Planet {planet.name} already exists in favourites")
            self._planets[key] = planet

        logger.info(f"Added favourite planet {planet.name}")
        return planet

    async def list_all(self) -> list[Planet]:
        async with self._lock:
            return list(self._planets.values())

    async def remove(self, name: str) -> None:
        if not name or not name.strip():
            raise InvalidArgumentError("Invalid planet name provided")

        key = normalize_name(name)
        async with self._lock:
            planet = self._planets.pop(key, None)

        if planet is None:
            raise NotFoundError(f"Planet {name} not found in favourites")
        logger.info(f"Removed favourite planet {planet.name}")

    async def find_by_name(self, name: str) -> Planet | None:
        async with self._lock:
            return self._planets.get(normalize_name(name))

    async def contains(self, name: str) -> bool:
        return await self.find_by_name(name) is not None
