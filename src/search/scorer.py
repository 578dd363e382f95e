"""Additive relevance scoring for breeds that passed the strict filter."""

from __future__ import annotations

from src.data.schemas import BreedRecord, ConstraintSet
from src.search.ranges import parse_range
from src.search.vocabulary import SIZE_KEYWORDS

TEMPERAMENT_POINTS = 10
SIZE_POINTS = 8
WEIGHT_BOUND_POINTS = 15
RANGE_BOUND_POINTS = 10
WITHIN_RANGE_BONUS = 5
KEYWORD_IN_NAME_POINTS = 5
KEYWORD_IN_TEMPERAMENT_POINTS = 3


def score_breed(breed: BreedRecord, constraints: ConstraintSet) -> int:
    """Compute a non-negative relevance score for ordering results.

    Scoring only orders results and never rejects a breed. Fields that
    cannot be parsed contribute nothing.

    Args:
        breed: Catalog record, already admitted by the strict filter.
        constraints: Extracted query constraints.

    Returns:
        Sum of all matching bonuses; 0 when nothing was requested.
    """
    temperament = (breed.temperament or "").lower()
    name = (breed.name or "").lower()
    score = 0

    score += TEMPERAMENT_POINTS * sum(
        1 for tag in constraints.temperaments if tag in temperament
    )
    score += SIZE_POINTS * sum(
        1
        for size in constraints.sizes
        if any(
            trigger in temperament or trigger in name
            for trigger in SIZE_KEYWORDS.get(size, (size,))
        )
    )

    score += _bound_points(
        breed.weight.imperial if breed.weight else None,
        constraints.min_weight,
        constraints.max_weight,
        WEIGHT_BOUND_POINTS,
    )
    score += _bound_points(
        breed.life_span,
        constraints.min_lifespan,
        constraints.max_lifespan,
        RANGE_BOUND_POINTS,
    )
    score += _bound_points(
        breed.height.imperial if breed.height else None,
        constraints.min_height,
        constraints.max_height,
        RANGE_BOUND_POINTS,
    )

    for keyword in constraints.free_keywords:
        if keyword in name:
            score += KEYWORD_IN_NAME_POINTS
        if keyword in temperament:
            score += KEYWORD_IN_TEMPERAMENT_POINTS

    return score


def _bound_points(text: str | None, low: int | None, high: int | None, points: int) -> int:
    if low is None and high is None:
        return 0
    breed_range = parse_range(text)
    if breed_range is None:
        return 0
    breed_min, breed_max = breed_range

    total = 0
    meets_high = high is not None and breed_max <= high
    meets_low = low is not None and breed_min >= low
    if meets_high:
        total += points
    if meets_low:
        total += points
    if meets_high and meets_low:
        total += WITHIN_RANGE_BONUS
    return total
