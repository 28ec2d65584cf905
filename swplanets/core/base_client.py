import asyncio
from typing import Any

import httpx
from loguru import logger


class BaseClient:
    """
    Base asynchronous HTTP client with a hard per-call deadline and logging.
    Requests are never retried here; callers decide what a failure means.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.headers = headers or {}
        self.transport = transport
        self._client: httpx.AsyncClient | None = None

    async def get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx.AsyncClient instance."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.headers,
                follow_redirects=True,
                transport=self.transport,
            )
        return self._client

    async def close(self):
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        """
        Send one request and raise for non-success statuses.

        httpx timeouts apply per network phase, so the whole exchange is also
        bounded with ``asyncio.wait_for`` to stop a slow trickle from hanging.
        """
        client = await self.get_client()
        try:
            response = await asyncio.wait_for(client.request(method, url, **kwargs), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.warning(f"Request timed out after {self.timeout}s ({method} {url})")
            raise httpx.TimeoutException(f"{method} {url} exceeded {self.timeout}s") from e
        except httpx.RequestError as e:
            logger.warning(f"Request failed ({method} {url}): {e}")
            raise

        response.raise_for_status()
        return response

    async def get(self, url: str, params: dict[str, Any] | None = None, **kwargs) -> Any:
        """Perform a GET request and return the JSON response."""
        response = await self._request("GET", url, params=params, **kwargs)
        return response.json()
