"""Strict admission filter applied before scoring.

A breed is admitted only if it satisfies every constraint family the
query specified. Within the size family any one requested size is
enough; within the temperament family every tag must be present.
Missing breed data never counts as a match.
"""

from __future__ import annotations

from src.data.schemas import BreedRecord, ConstraintSet, Measurement
from src.search.ranges import parse_range
from src.search.vocabulary import SIZE_KEYWORDS


def admits(breed: BreedRecord, constraints: ConstraintSet) -> bool:
    """Decide whether *breed* satisfies all requested constraint families.

    Args:
        breed: Catalog record to test.
        constraints: Extracted query constraints.

    Returns:
        True if the breed passes every family that has a requested value.
    """
    return (
        _within_bounds(
            _imperial(breed.weight), constraints.min_weight, constraints.max_weight
        )
        and _within_bounds(
            breed.life_span, constraints.min_lifespan, constraints.max_lifespan
        )
        and _within_bounds(
            _imperial(breed.height), constraints.min_height, constraints.max_height
        )
        and _has_all_temperaments(breed, constraints.temperaments)
        and _has_any_size(breed, constraints.sizes)
    )


def _imperial(measurement: Measurement | None) -> str | None:
    return measurement.imperial if measurement is not None else None


def _within_bounds(text: str | None, low: int | None, high: int | None) -> bool:
    if low is None and high is None:
        return True
    breed_range = parse_range(text)
    if breed_range is None:
        return False
    breed_min, breed_max = breed_range
    if low is not None and breed_min < low:
        return False
    if high is not None and breed_max > high:
        return False
    return True


def _has_all_temperaments(breed: BreedRecord, tags: tuple[str, ...]) -> bool:
    if not tags:
        return True
    temperament = (breed.temperament or "").lower()
    return all(tag in temperament for tag in tags)


def _has_any_size(breed: BreedRecord, sizes: tuple[str, ...]) -> bool:
    if not sizes:
        return True
    haystack = " ".join(
        (breed.temperament or "", breed.name or "", breed.breed_group or "")
    ).lower()
    return any(
        trigger in haystack for size in sizes for trigger in SIZE_KEYWORDS.get(size, (size,))
    )
