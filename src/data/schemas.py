"""Pydantic models for breed records, constraints and search responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Measurement(BaseModel):
    """Imperial and metric range strings as published by TheDogAPI."""

    imperial: str | None = Field(default=None, description="Range in lbs or inches, e.g. '3 - 6'")
    metric: str | None = Field(default=None, description="Range in kg or cm")


class BreedRecord(BaseModel):
    """A single breed from the external catalog.

    Every field is optional because catalog entries are frequently
    incomplete. Unknown keys are preserved so results round-trip to
    clients unchanged.
    """

    model_config = ConfigDict(extra="allow")

    id: int | None = Field(default=None, description="Catalog identifier")
    name: str = Field(default="", description="Breed name")
    temperament: str | None = Field(default=None, description="Comma-separated descriptors")
    weight: Measurement | None = None
    height: Measurement | None = None
    life_span: str | None = Field(default=None, description="e.g. '10 - 12 years'")
    breed_group: str | None = None
    bred_for: str | None = None
    origin: str | None = None
    reference_image_id: str | None = None


class ScoredBreed(BreedRecord):
    """A breed that passed the strict filter, with its relevance score."""

    match_score: int = Field(default=0, ge=0, description="Additive relevance score")


class ConstraintSet(BaseModel):
    """Structured constraints extracted from a free-text query.

    Bounds left as None were not requested. Sizes and temperaments are
    kept in vocabulary order.
    """

    model_config = ConfigDict(frozen=True)

    sizes: tuple[str, ...] = ()
    temperaments: tuple[str, ...] = ()
    min_weight: int | None = Field(default=None, description="Pounds")
    max_weight: int | None = Field(default=None, description="Pounds")
    min_height: int | None = Field(default=None, description="Inches")
    max_height: int | None = Field(default=None, description="Inches")
    min_lifespan: int | None = Field(default=None, description="Years")
    max_lifespan: int | None = Field(default=None, description="Years")
    free_keywords: tuple[str, ...] = ()

    def is_empty(self) -> bool:
        """Return True if no constraint of any kind was extracted."""
        return self == ConstraintSet()


class AdvancedFilters(BaseModel):
    """Preset filter selections from the advanced filter bar."""

    natures: list[str] = Field(default_factory=list, description="Temperament tags")
    lifespan: str | None = Field(default=None, description="Preset such as '10-12 yrs'")
    height: str | None = Field(default=None, description="Preset such as '10-15 in'")
    weight: str | None = Field(default=None, description="Preset such as '20-40 lbs'")


class SearchResponse(BaseModel):
    """Full response from a search query."""

    query: str = Field(description="Original search query")
    extracted_constraints: ConstraintSet = Field(default_factory=ConstraintSet)
    results: list[ScoredBreed] = Field(default_factory=list)
    total: int = Field(default=0, description="Number of breeds that passed the filter")
    cached: bool = Field(default=False, description="Ranked list served from cache")
    search_time_ms: float = Field(default=0.0)
