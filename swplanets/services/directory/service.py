from typing import Any

import httpx
from loguru import logger

from swplanets.core.exceptions import UpstreamError, UpstreamUnavailableError
from swplanets.models.planet import Planet, PlanetPage
from swplanets.services.directory.client import DirectoryClient


class DirectoryService:
    """
    Reads the remote catalog and translates every transport or payload failure
    into the service error taxonomy, so callers never see httpx exceptions.
    """

    def __init__(self, base_url: str, timeout: float = 10.0, transport: httpx.AsyncBaseTransport | None = None):
        self.client = DirectoryClient(base_url=base_url, timeout=timeout, transport=transport)

    async def close(self):
        """Close the underlying HTTP client."""
        await self.client.close()

    async def get_count(self) -> int:
        """Total number of planets in the catalog."""
        try:
            data = await self.client.get("planets")
            return PlanetPage.model_validate(data).count
        except httpx.HTTPStatusError as e:
            logger.error(f"Catalog count query returned {e.response.status_code}")
            raise UpstreamUnavailableError(f"Error fetching data: {e.response.reason_phrase}") from e
        except httpx.RequestError as e:
            logger.error(f"Catalog count query failed: {e}")
            raise UpstreamUnavailableError("Planet catalog is unavailable") from e
        except ValueError as e:  # JSONDecodeError and pydantic ValidationError
            logger.error(f"Catalog count query returned an unreadable body: {e}")
            raise UpstreamUnavailableError("Planet catalog returned an invalid response") from e

    async def get_planet(self, planet_id: int) -> Planet | None:
        """Planet at ordinal ``planet_id``, or None when the id is unallocated."""
        try:
            data = await self.client.get(f"planets/{planet_id}/")
            return Planet.model_validate(data)
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                return None
            logger.error(f"Error fetching planet with ID {planet_id}: {e.response.status_code}")
            raise UpstreamError(f"Error fetching planet {planet_id}: {e.response.reason_phrase}") from e
        except httpx.RequestError as e:
            logger.error(f"Error fetching planet with ID {planet_id}: {e}")
            raise UpstreamError(f"Error fetching planet {planet_id}") from e
        except ValueError as e:  # JSONDecodeError and pydantic ValidationError
            logger.error(f"Planet {planet_id} payload could not be read: {e}")
            raise UpstreamError(f"Planet catalog returned an invalid planet for {planet_id}") from e

    async def get_page(self, page: int | None = None) -> dict[str, Any]:
        """One listing page, passed through untouched."""
        params = {"page": page} if page is not None else None
        try:
            return await self.client.get("planets", params=params)
        except httpx.HTTPStatusError as e:
            logger.error(f"Catalog page {page} returned {e.response.status_code}")
            raise UpstreamError(f"Error fetching data: {e.response.reason_phrase}") from e
        except httpx.RequestError as e:
            logger.error(f"Catalog page {page} request failed: {e}")
            raise UpstreamError("Planet catalog is unavailable") from e
        except ValueError as e:
            logger.error(f"Catalog page {page} returned an unreadable body: {e}")
            raise UpstreamError("Planet catalog returned an invalid response") from e
