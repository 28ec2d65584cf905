import random
from typing import Protocol

from loguru import logger

from swplanets.core.exceptions import NotFoundError
from swplanets.models.planet import Planet
from swplanets.services.favourites import FavouritesStore
from swplanets.services.seen import SeenSet


class PlanetDirectory(Protocol):
    async def get_count(self) -> int: ...

    async def get_planet(self, planet_id: int) -> Planet | None: ...


class DiscoveryEngine:
    """
    Picks a random catalog planet the caller has not come across yet.

    A candidate is accepted when it has never been handed out before. Once
    everything has been handed out, a candidate that is not a favourite is
    accepted instead, so discovery keeps working after the catalog is
    exhausted. Seen favourites are skipped.

    The attempt budget equals the catalog size. Ids are drawn as a random
    permutation of 1..N, so every id is tried at most once and the budget
    covers the whole id space, including the highest id.
    """

    def __init__(
        self,
        directory: PlanetDirectory,
        seen: SeenSet,
        favourites: FavouritesStore,
        rng: random.Random | None = None,
    ):
        self.directory = directory
        self.seen = seen
        self.favourites = favourites
        self.rng = rng or random.Random()

    async def discover(self) -> Planet:
        """
        Return a novel planet.

        Raises:
            UpstreamUnavailableError: the catalog size could not be fetched.
            UpstreamError: a planet lookup failed with anything other than 404.
            NotFoundError: the attempt budget ran out.
        """
        count = await self.directory.get_count()
        if count <= 0:
            logger.info("Catalog is empty; nothing to discover")
            raise NotFoundError("No planets found")

        for attempt, planet_id in enumerate(self._candidate_ids(count), start=1):
            planet = await self.directory.get_planet(planet_id)
            if planet is None:
                logger.debug(f"Attempt {attempt}/{count}: id {planet_id} is unallocated")
                continue

            if await self.seen.mark_seen(planet.name):
                logger.info(f"Discovered new planet {planet.name} (id {planet_id}) after {attempt} attempt(s)")
                return planet

            if not await self.favourites.contains(planet.name):
                logger.info(f"Returning already seen planet {planet.name} (id {planet_id}); not a favourite")
                return planet

            logger.debug(f"Attempt {attempt}/{count}: {planet.name} is seen and favourited")

        logger.info(f"No discoverable planet after {count} attempts")
        raise NotFoundError("No planets found")

    def _candidate_ids(self, count: int) -> list[int]:
        return self.rng.sample(range(1, count + 1), count)
