import httpx
import pytest
from fastapi.testclient import TestClient

from swplanets.core.app import app
from swplanets.models.planet import Planet
from swplanets.services.directory.service import DirectoryService

BASE_URL = "https://swapi.test/api/"

TATOOINE = {
    "name": "Tatooine",
    "rotation_period": "23",
    "orbital_period": "304",
    "diameter": "10465",
    "climate": "arid",
    "gravity": "1 standard",
    "terrain": "desert",
    "surface_water": "1",
    "population": "200000",
    "residents": ["https://swapi.dev/api/people/1/"],
    "films": ["https://swapi.dev/api/films/1/"],
    "created": "2014-12-09T13:50:49.641000Z",
    "edited": "2014-12-20T20:58:18.411000Z",
    "url": "https://swapi.dev/api/planets/1/",
}

NABOO = {
    "name": "Naboo",
    "rotation_period": "26",
    "orbital_period": "312",
    "diameter": "12120",
    "climate": "temperate",
    "gravity": "1 standard",
    "terrain": "grassy hills, swamps, forests, mountains",
    "surface_water": "12",
    "population": "4500000000",
    "residents": [],
    "films": [],
    "created": "2014-12-10T11:52:31.066000Z",
    "edited": "2014-12-20T20:58:18.430000Z",
    "url": "https://swapi.dev/api/planets/8/",
}

YAVIN_IV = {"name": "Yavin IV", "climate": "temperate, tropical", "url": "https://swapi.dev/api/planets/3/"}


class FakeDirectory:
    """In-memory stand-in for DirectoryService that records every lookup."""

    def __init__(self, planets: dict, count: int | None = None, count_error: Exception | None = None):
        self.planets = planets
        self.count = len(planets) if count is None else count
        self.count_error = count_error
        self.count_calls = 0
        self.requested: list[int] = []

    async def get_count(self) -> int:
        self.count_calls += 1
        if self.count_error is not None:
            raise self.count_error
        return self.count

    async def get_planet(self, planet_id: int) -> Planet | None:
        self.requested.append(planet_id)
        value = self.planets.get(planet_id)
        if isinstance(value, Exception):
            raise value
        return value

    async def close(self):
        pass


class CatalogStub:
    """httpx transport handler serving a tiny SWAPI-shaped catalog."""

    def __init__(
        self,
        planets: dict[int, dict],
        count: int | None = None,
        status: int = 200,
        planet_status: int = 200,
        error: Exception | None = None,
    ):
        self.planets = planets
        self.count = len(planets) if count is None else count
        self.status = status
        self.planet_status = planet_status
        self.error = error
        self.paths: list[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.paths.append(request.url.path)
        if self.error is not None:
            raise self.error
        if self.status != 200:
            return httpx.Response(self.status, json={"detail": "boom"})

        path = request.url.path.rstrip("/")
        if path == "/api/planets":
            return httpx.Response(
                200,
                json={
                    "count": self.count,
                    "next": None,
                    "previous": None,
                    "page": request.url.params.get("page"),
                    "results": list(self.planets.values()),
                },
            )

        if self.planet_status != 200:
            return httpx.Response(self.planet_status, json={"detail": "boom"})

        planet_id = int(path.rsplit("/", 1)[-1])
        if planet_id in self.planets:
            return httpx.Response(200, json=self.planets[planet_id])
        return httpx.Response(404, json={"detail": "Not found"})

    @property
    def planet_requests(self) -> list[str]:
        return [p for p in self.paths if p.rstrip("/") != "/api/planets"]


def make_directory(stub: CatalogStub, timeout: float = 10.0) -> DirectoryService:
    return DirectoryService(base_url=BASE_URL, timeout=timeout, transport=httpx.MockTransport(stub))


@pytest.fixture
def tatooine() -> Planet:
    return Planet.model_validate(TATOOINE)


@pytest.fixture
def naboo() -> Planet:
    return Planet.model_validate(NABOO)


@pytest.fixture
def catalog() -> CatalogStub:
    return CatalogStub({1: TATOOINE, 2: NABOO, 3: YAVIN_IV})


@pytest.fixture
def client(catalog):
    """TestClient with fresh stores and the remote catalog replaced by ``catalog``."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        test_client.app.state.directory = make_directory(catalog)
        yield test_client
