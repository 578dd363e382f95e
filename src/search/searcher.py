"""Search service tying together extraction, ranking, catalog and cache."""

from __future__ import annotations

import logging
import time

from src.data.catalog import BreedCatalog
from src.data.schemas import ConstraintSet, ScoredBreed, SearchResponse
from src.search.cache import ResponseCache, search_key
from src.search.extractor import extract_traits
from src.search.ranking import rank_breeds

logger = logging.getLogger(__name__)


class BreedSearcher:
    """Natural-language breed search over a catalog snapshot.

    The full ranked list for a query is cached, so requests for the
    same query with different limits share one ranking pass.

    Args:
        catalog: Provider of breed records.
        cache: Optional response cache keyed by normalized query text.
    """

    def __init__(
        self,
        catalog: BreedCatalog,
        cache: ResponseCache | None = None,
    ) -> None:
        self.catalog = catalog
        self.cache = cache

    def search(self, query: str, limit: int = 10) -> SearchResponse:
        """Search breeds by free-text query.

        Args:
            query: Natural language query. Callers reject blank input.
            limit: Maximum number of results to return.

        Returns:
            SearchResponse with the top *limit* results and the total
            number of admitted breeds.

        Raises:
            CatalogError: If the breed catalog cannot be loaded.
        """
        start = time.monotonic()
        key = search_key(query)

        cached = self.cache.get(key) if self.cache is not None else None
        if cached is not None:
            constraints, ranked = cached
        else:
            constraints, ranked = self._rank(query)
            if self.cache is not None:
                self.cache.set(key, (constraints, ranked))

        elapsed_ms = (time.monotonic() - start) * 1000

        return SearchResponse(
            query=query,
            extracted_constraints=constraints,
            results=ranked[:limit],
            total=len(ranked),
            cached=cached is not None,
            search_time_ms=round(elapsed_ms, 1),
        )

    def _rank(self, query: str) -> tuple[ConstraintSet, list[ScoredBreed]]:
        constraints = extract_traits(query)
        breeds = self.catalog.get_breeds()
        ranked = rank_breeds(breeds, constraints)
        logger.info(
            "Query %r: %d of %d breeds admitted", query, len(ranked), len(breeds)
        )
        return constraints, ranked
