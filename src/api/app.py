"""FastAPI application factory with lifespan management."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.config import Config, get_config
from src.data.catalog import BreedCatalog
from src.search.cache import ResponseCache
from src.search.searcher import BreedSearcher


def build_services(config: Config) -> tuple[ResponseCache, BreedCatalog, BreedSearcher]:
    """Create the cache, catalog and searcher shared by all requests.

    Args:
        config: Application configuration.

    Returns:
        Tuple of (cache, catalog, searcher) wired to each other.
    """
    cache = ResponseCache(ttl_seconds=config.cache_ttl_seconds)
    catalog = BreedCatalog(
        base_url=config.dog_api_url,
        api_key=config.dog_api_key,
        cache=cache,
        snapshot_path=config.catalog_path,
        timeout=config.request_timeout,
    )
    searcher = BreedSearcher(catalog=catalog, cache=cache)
    return cache, catalog, searcher


def create_app(config: Config | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Configuration to use; read from the environment if None.

    Returns:
        Configured FastAPI application instance.
    """
    config = config or get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize shared resources on startup, clean up on shutdown."""
        app.state.config = config
        app.state.cache, app.state.catalog, app.state.searcher = build_services(config)

        yield

        app.state.cache.clear()

    app = FastAPI(
        title="Dog Breed Finder",
        description="Natural-language dog breed search over TheDogAPI catalog",
        version="0.1.0",
        lifespan=lifespan,
    )

    from src.api.routes import router

    app.include_router(router)

    return app
