"""Turn advanced-filter preset selections into a canonical query string."""

from __future__ import annotations

from src.data.schemas import AdvancedFilters

LIFESPAN_PRESETS: dict[str, str] = {
    "6-8 yrs": "lifespan 6-8",
    "8-10 yrs": "lifespan 8-10",
    "10-12 yrs": "lifespan 10-12",
    "12-14 yrs": "lifespan 12-14",
    "14+ yrs": "lifespan 14-20",
}

HEIGHT_PRESETS: dict[str, str] = {
    "< 10 in": "height 0-10 inches",
    "10-15 in": "height 10-15 inches",
    "15-20 in": "height 15-20 inches",
    "20-25 in": "height 20-25 inches",
    "> 25 in": "height 25-50 inches",
}

WEIGHT_PRESETS: dict[str, str] = {
    "< 20 lbs": "at most 20 lbs",
    "20-40 lbs": "at least 20 lbs at most 40 lbs",
    "40-60 lbs": "at least 40 lbs at most 60 lbs",
    "60-80 lbs": "at least 60 lbs at most 80 lbs",
    "> 80 lbs": "at least 80 lbs",
}


def build_query(filters: AdvancedFilters) -> str:
    """Build the query text the trait extractor understands.

    Args:
        filters: Selected natures and preset labels.

    Returns:
        Comma-separated query, empty if nothing was selected.

    Raises:
        ValueError: If a preset label is not recognized.
    """
    parts = []
    natures = [n.strip().lower() for n in filters.natures if n.strip()]
    if natures:
        parts.append(" ".join(natures))
    if filters.lifespan:
        parts.append(_lookup(LIFESPAN_PRESETS, filters.lifespan, "lifespan"))
    if filters.height:
        parts.append(_lookup(HEIGHT_PRESETS, filters.height, "height"))
    if filters.weight:
        parts.append(_lookup(WEIGHT_PRESETS, filters.weight, "weight"))
    return ", ".join(parts)


def _lookup(presets: dict[str, str], label: str, family: str) -> str:
    try:
        return presets[label.strip()]
    except KeyError:
        raise ValueError(
            f"Unknown {family} preset {label!r}; expected one of {sorted(presets)}"
        ) from None
