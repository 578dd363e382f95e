"""Keyword tables used by trait extraction, filtering and scoring."""

from __future__ import annotations

SIZE_KEYWORDS: dict[str, tuple[str, ...]] = {
    "small": ("small", "tiny", "toy", "compact", "miniature"),
    "medium": ("medium", "moderate", "average"),
    "large": ("large", "big", "giant", "huge"),
}

# Each tag is matched literally against breed temperament text, so the
# triggers must stay words that TheDogAPI actually uses.
TEMPERAMENT_KEYWORDS: dict[str, tuple[str, ...]] = {
    tag: (tag,)
    for tag in (
        "friendly",
        "energetic",
        "loyal",
        "playful",
        "protective",
        "calm",
        "intelligent",
        "gentle",
        "alert",
        "affectionate",
        "independent",
        "outgoing",
        "brave",
        "adaptable",
        "social",
        "curious",
        "devoted",
        "patient",
        "confident",
        "sensitive",
        "active",
        "stubborn",
        "obedient",
        "docile",
        "bold",
    )
}

STOP_WORDS: frozenset[str] = frozenset(
    {
        # connectors and filler
        "with",
        "that",
        "than",
        "from",
        "into",
        "like",
        "some",
        "very",
        "good",
        "looking",
        "need",
        "want",
        "would",
        "should",
        "which",
        "about",
        "around",
        "between",
        # covered by structured fields
        "least",
        "most",
        "more",
        "less",
        "over",
        "under",
        "above",
        "below",
        "weight",
        "weighing",
        "weighs",
        "pounds",
        "pound",
        "kilograms",
        "kilogram",
        "kilos",
        "kilo",
        "kgs",
        "lifespan",
        "life",
        "span",
        "years",
        "year",
        "height",
        "inches",
        "inch",
        "tall",
        "size",
        "nature",
        "temperament",
        # generic domain words
        "dogs",
        "dog's",
        "breed",
        "breeds",
        "puppy",
        "puppies",
        "kids",
        "cats",
        "families",
        "family",
    }
)

KG_TO_LB = 2.20462


def trigger_words() -> frozenset[str]:
    """Every size and temperament trigger in one set."""
    words: set[str] = set()
    for table in (SIZE_KEYWORDS, TEMPERAMENT_KEYWORDS):
        for triggers in table.values():
            words.update(triggers)
    return frozenset(words)
