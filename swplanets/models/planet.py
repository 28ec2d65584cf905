from pydantic import BaseModel, ConfigDict, Field


class Planet(BaseModel):
    """
    A planet record as served by the remote catalog.

    Every scalar attribute is kept as the catalog's free-form text ("unknown",
    "1 standard", "200000") and is never parsed.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = ""
    diameter: str = ""
    rotation_period: str = ""
    orbital_period: str = ""
    gravity: str = ""
    population: str = ""
    climate: str = ""
    terrain: str = ""
    surface_water: str = ""
    residents: list[str] = Field(default_factory=list, description="Resident resource URLs")
    films: list[str] = Field(default_factory=list, description="Film resource URLs")
    created: str = ""
    edited: str = ""
    url: str = ""


class PlanetPage(BaseModel):
    """One page of the catalog listing; ``count`` is the size of the whole catalog."""

    model_config = ConfigDict(extra="ignore")

    count: int
    next: str | None = None
    previous: str | None = None
    results: list[Planet] = Field(default_factory=list)
