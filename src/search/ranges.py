"""Parse numeric ranges out of catalog strings such as '3 - 6' or '10 - 12 years'."""

from __future__ import annotations

import re

_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")


def parse_range(text: str | None) -> tuple[float, float] | None:
    """Return (low, high) from every number found in *text*.

    A single number yields a degenerate range. Returns None when the
    text is missing or holds no digits.
    """
    if not text:
        return None
    numbers = [float(n) for n in _NUMBER_RE.findall(text)]
    if not numbers:
        return None
    return min(numbers), max(numbers)
