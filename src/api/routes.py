"""FastAPI routes for breed search, breed lookup and health check."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, Request

from src.data.catalog import CatalogError
from src.data.schemas import AdvancedFilters, BreedRecord, SearchResponse
from src.search.query_builder import (
    HEIGHT_PRESETS,
    LIFESPAN_PRESETS,
    WEIGHT_PRESETS,
    build_query,
)
from src.search.vocabulary import SIZE_KEYWORDS, TEMPERAMENT_KEYWORDS

logger = logging.getLogger(__name__)

router = APIRouter()

MAX_LIMIT = 100


def _run_search(request: Request, query: str, limit: int) -> SearchResponse:
    if not query.strip():
        raise HTTPException(status_code=400, detail="Query parameter is required")

    searcher = request.app.state.searcher
    try:
        return searcher.search(query.strip(), limit=limit)
    except CatalogError as err:
        logger.error("Search failed for %r: %s", query, err)
        raise HTTPException(status_code=502, detail="Failed to search breeds") from err


@router.get("/api/search", response_model=SearchResponse)
def api_search(
    request: Request,
    q: str = "",
    limit: int = Query(10, ge=1, le=MAX_LIMIT),
) -> SearchResponse:
    """Search breeds by natural language query.

    Args:
        request: FastAPI request object.
        q: Free-text query, e.g. "friendly small dogs at most 20 lbs".
        limit: Number of results to return.

    Returns:
        SearchResponse as JSON.
    """
    return _run_search(request, q, limit)


@router.post("/api/search/advanced", response_model=SearchResponse)
def api_advanced_search(
    request: Request,
    filters: AdvancedFilters,
    limit: int = Query(10, ge=1, le=MAX_LIMIT),
) -> SearchResponse:
    """Search breeds using preset filter selections.

    The selections are converted to a canonical query string first, so
    results are identical to typing that query.
    """
    try:
        query = build_query(filters)
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
    if not query:
        raise HTTPException(status_code=400, detail="Select at least one filter")
    return _run_search(request, query, limit)


@router.get("/api/breeds/{breed_id}", response_model=BreedRecord)
def get_breed(request: Request, breed_id: int) -> BreedRecord:
    """Return a single catalog record."""
    try:
        breed = request.app.state.catalog.get_breed(breed_id)
    except CatalogError as err:
        raise HTTPException(status_code=502, detail="Failed to load breeds") from err
    if breed is None:
        raise HTTPException(status_code=404, detail=f"Breed {breed_id} not found")
    return breed


@router.get("/api/vocabulary")
async def vocabulary() -> dict:
    """Recognized size categories, temperament tags and filter presets."""
    return {
        "sizes": list(SIZE_KEYWORDS),
        "temperaments": list(TEMPERAMENT_KEYWORDS),
        "lifespans": list(LIFESPAN_PRESETS),
        "heights": list(HEIGHT_PRESETS),
        "weights": list(WEIGHT_PRESETS),
    }


@router.get("/health")
def health_check(request: Request) -> dict:
    """Health check endpoint for monitoring.

    Returns:
        Dict with catalog availability and cache counters.
    """
    try:
        breed_count = len(request.app.state.catalog.get_breeds())
        catalog_status = "loaded"
    except CatalogError:
        logger.warning("Breed catalog unavailable during health check")
        breed_count = 0
        catalog_status = "unavailable"
    return {
        "status": "healthy" if catalog_status == "loaded" else "degraded",
        "catalog": catalog_status,
        "breeds": breed_count,
        "cache": request.app.state.cache.stats(),
    }
