from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from swplanets.core.version import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    PORT: int = 8000
    APP_ENV: Literal["development", "production"] = "production"
    LOG_LEVEL: str = "INFO"

    SWAPI_BASE_URL: str = "https://swapi.dev/api/"
    # Upper bound for a single catalog call, connect through body
    UPSTREAM_TIMEOUT_SECONDS: float = 10.0

    # Answer GET /api/favourite with 404 instead of [] when nothing is stored
    FAVOURITES_EMPTY_IS_NOT_FOUND: bool = False
    # Fixed seed makes /api/random reproducible; None seeds from the OS
    DISCOVERY_SEED: int | None = None


settings = Settings()

APP_VERSION = __version__
