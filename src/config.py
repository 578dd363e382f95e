"""Central application configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _optional_path(name: str) -> Path | None:
    value = os.getenv(name)
    return Path(value) if value else None


@dataclass(frozen=True)
class Config:
    """Central application configuration.

    Reads from environment variables with sensible defaults.
    All paths are resolved relative to project root.
    """

    # Paths
    data_dir: Path = field(default_factory=lambda: Path(os.getenv("DATA_DIR", "data")))
    catalog_path: Path | None = field(default_factory=lambda: _optional_path("CATALOG_PATH"))

    # TheDogAPI
    dog_api_url: str = field(
        default_factory=lambda: os.getenv("DOG_API_URL", "https://api.thedogapi.com/v1")
    )
    dog_api_key: str = field(default_factory=lambda: os.getenv("DOG_API_KEY", ""))
    request_timeout: int = 30

    # Response cache
    cache_ttl_seconds: int = field(
        default_factory=lambda: int(os.getenv("CACHE_TTL_SECONDS", "1800"))
    )

    # Search
    default_limit: int = 10

    # Server
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))


def get_config() -> Config:
    """Get application configuration.

    Returns:
        Config instance with values from environment or defaults.
    """
    return Config()
