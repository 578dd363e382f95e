"""Rule-based extraction of breed constraints from free-text queries.

Queries like "friendly small dogs at most 40 lbs, lifespan 10-12" are
turned into a ConstraintSet using fixed keyword tables and regular
expressions. There is no statistical model involved: the same query
always yields the same constraints.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable

from src.data.schemas import ConstraintSet
from src.search.vocabulary import (
    KG_TO_LB,
    SIZE_KEYWORDS,
    STOP_WORDS,
    TEMPERAMENT_KEYWORDS,
    trigger_words,
)

logger = logging.getLogger(__name__)

_UNIT = r"(lbs?|pounds?|kgs?|kilos?|kilograms?)"
_NOT_OTHER_UNIT = r"(?!\d)(?!\s*(?:in\b|inch|inches|cm\b|years?|yrs?))"

AT_LEAST_RE = re.compile(r"\bat\s+least\s+(\d+)\s*" + _UNIT)
AT_MOST_RE = re.compile(r"\bat\s+most\s+(\d+)\s*" + _UNIT)
LOWER_FALLBACK_RE = re.compile(
    r"\b(?:over|above|more\s+than)\s+(\d+)" + _NOT_OTHER_UNIT + r"\s*" + _UNIT + "?"
)
UPPER_FALLBACK_RE = re.compile(
    r"\b(?:under|below|less\s+than)\s+(\d+)" + _NOT_OTHER_UNIT + r"\s*" + _UNIT + "?"
)
LIFESPAN_RE = re.compile(r"\blife\s*span\s*(?:of\s+)?(\d+)\s*-\s*(\d+)")
HEIGHT_RE = re.compile(r"\bheight\s*(?:of\s+)?(\d+)\s*-\s*(\d+)\s*(?:inches|in\b)?")

_PUNCTUATION = ".,;:!?\"'()[]{}"
_TRIGGERS = trigger_words()


def extract_traits(query: str) -> ConstraintSet:
    """Parse a natural-language query into structured constraints.

    Args:
        query: Free text typed by the user. May be empty.

    Returns:
        ConstraintSet with every recognized constraint populated. Fields
        for patterns that were not found stay empty or None.
    """
    text = (query or "").lower()

    sizes = _match_vocabulary(text, SIZE_KEYWORDS)
    temperaments = _match_vocabulary(text, TEMPERAMENT_KEYWORDS)

    min_weight = _resolve_bound(text, AT_LEAST_RE, max)
    if min_weight is None:
        min_weight = _resolve_bound(text, LOWER_FALLBACK_RE, max)
    max_weight = _resolve_bound(text, AT_MOST_RE, min)
    if max_weight is None:
        max_weight = _resolve_bound(text, UPPER_FALLBACK_RE, min)

    min_lifespan, max_lifespan = _match_range(text, LIFESPAN_RE)
    min_height, max_height = _match_range(text, HEIGHT_RE)

    min_weight, max_weight = _discard_inverted(min_weight, max_weight, "weight")
    min_height, max_height = _discard_inverted(min_height, max_height, "height")
    min_lifespan, max_lifespan = _discard_inverted(min_lifespan, max_lifespan, "lifespan")

    constraints = ConstraintSet(
        sizes=sizes,
        temperaments=temperaments,
        min_weight=min_weight,
        max_weight=max_weight,
        min_height=min_height,
        max_height=max_height,
        min_lifespan=min_lifespan,
        max_lifespan=max_lifespan,
        free_keywords=_residual_keywords(text),
    )
    logger.debug("Extracted constraints for %r: %s", query, constraints)
    return constraints


def _match_vocabulary(text: str, table: dict[str, tuple[str, ...]]) -> tuple[str, ...]:
    return tuple(
        category
        for category, triggers in table.items()
        if any(trigger in text for trigger in triggers)
    )


def _resolve_bound(
    text: str,
    pattern: re.Pattern[str],
    pick: Callable[..., int],
) -> int | None:
    """Apply *pick* (max or min) over every weight match of *pattern*."""
    values = [_to_pounds(number, unit) for number, unit in pattern.findall(text)]
    values = [value for value in values if value is not None]
    return pick(values) if values else None


def _to_pounds(number: str, unit: str) -> int | None:
    """Convert a matched weight to pounds, or None if it cannot be represented."""
    try:
        value = int(number)
        if unit.startswith("k"):
            # Round half up, not to even.
            return int(math.floor(value * KG_TO_LB + 0.5))
    except (ValueError, OverflowError):
        logger.debug("Ignoring unrepresentable weight %.20s...", number)
        return None
    return value


def _match_range(text: str, pattern: re.Pattern[str]) -> tuple[int | None, int | None]:
    match = pattern.search(text)
    if match is None:
        return None, None
    try:
        return int(match.group(1)), int(match.group(2))
    except ValueError:
        # Digit runs past the int conversion limit.
        return None, None


def _discard_inverted(
    low: int | None,
    high: int | None,
    family: str,
) -> tuple[int | None, int | None]:
    if low is not None and high is not None and low > high:
        logger.debug("Discarding unsatisfiable %s range %d-%d", family, low, high)
        return None, None
    return low, high


def _residual_keywords(text: str) -> tuple[str, ...]:
    keywords: list[str] = []
    for raw in text.split():
        token = raw.strip(_PUNCTUATION)
        if (
            len(token) > 3
            and token not in STOP_WORDS
            and token not in _TRIGGERS
            and not token.replace("-", "").isdigit()
            and token not in keywords
        ):
            keywords.append(token)
    return tuple(keywords)
