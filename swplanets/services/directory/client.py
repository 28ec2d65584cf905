import httpx

from swplanets.core.base_client import BaseClient
from swplanets.core.version import __version__


class DirectoryClient(BaseClient):
    """
    Client for the remote planet catalog (SWAPI-compatible).
    """

    def __init__(self, base_url: str, timeout: float = 10.0, transport: httpx.AsyncBaseTransport | None = None):
        headers = {
            "User-Agent": f"SWPlanets/{__version__}",
            "Accept": "application/json",
        }
        super().__init__(base_url=base_url, timeout=timeout, headers=headers, transport=transport)
