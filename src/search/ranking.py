"""Filter, score and order a breed collection against extracted constraints."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from src.data.schemas import BreedRecord, ConstraintSet, ScoredBreed
from src.search.filters import admits
from src.search.scorer import score_breed

logger = logging.getLogger(__name__)


def rank_breeds(
    breeds: Iterable[BreedRecord],
    constraints: ConstraintSet,
) -> list[ScoredBreed]:
    """Rank the breeds that satisfy every requested constraint.

    Rejected breeds never appear in the output. Survivors are sorted by
    descending score; the sort is stable, so breeds with equal scores
    keep their catalog order.

    Args:
        breeds: Catalog snapshot in its original order.
        constraints: Extracted query constraints.

    Returns:
        Full ordered list of ScoredBreed objects. Truncation is up to
        the caller.
    """
    scored = [
        ScoredBreed.model_validate(
            {**breed.model_dump(), "match_score": score_breed(breed, constraints)}
        )
        for breed in breeds
        if admits(breed, constraints)
    ]
    scored.sort(key=lambda b: b.match_score, reverse=True)
    logger.debug("Ranked %d admitted breeds", len(scored))
    return scored
