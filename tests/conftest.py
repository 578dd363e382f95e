"""Shared test fixtures for the Dog Breed Finder test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.data.schemas import BreedRecord, ScoredBreed, SearchResponse


def make_breed(
    name: str,
    temperament: str | None = None,
    weight: str | None = None,
    height: str | None = None,
    life_span: str | None = None,
    breed_group: str | None = None,
    breed_id: int | None = None,
) -> BreedRecord:
    """Build a BreedRecord the way TheDogAPI shapes it."""
    return BreedRecord.model_validate(
        {
            "id": breed_id,
            "name": name,
            "temperament": temperament,
            "weight": {"imperial": weight} if weight is not None else None,
            "height": {"imperial": height} if height is not None else None,
            "life_span": life_span,
            "breed_group": breed_group,
        }
    )


@pytest.fixture
def chihuahua() -> BreedRecord:
    """Create a small, friendly breed."""
    return make_breed(
        "Chihuahua",
        temperament="Friendly, Alert",
        weight="3 - 6",
        height="5 - 8",
        life_span="12 - 20 years",
        breed_group="Toy",
        breed_id=1,
    )


@pytest.fixture
def great_dane() -> BreedRecord:
    """Create a giant, friendly breed."""
    return make_breed(
        "Great Dane",
        temperament="Friendly, Loyal",
        weight="110 - 175",
        height="28 - 32",
        life_span="7 - 10 years",
        breed_group="Working",
        breed_id=2,
    )


@pytest.fixture
def beagle() -> BreedRecord:
    """Create a medium breed with a broad temperament."""
    return make_breed(
        "Beagle",
        temperament="Amiable, Even Tempered, Excitable, Determined, Gentle, Intelligent",
        weight="20 - 35",
        height="13 - 15",
        life_span="13 - 15 years",
        breed_group="Hound",
        breed_id=3,
    )


@pytest.fixture
def unknown_breed() -> BreedRecord:
    """Create a breed with no measurements or temperament."""
    return make_breed("Mystery Mutt", breed_id=4)


@pytest.fixture
def catalog_breeds(
    chihuahua: BreedRecord,
    great_dane: BreedRecord,
    beagle: BreedRecord,
    unknown_breed: BreedRecord,
) -> list[BreedRecord]:
    """Create a small catalog in a fixed order."""
    return [chihuahua, great_dane, beagle, unknown_breed]


@pytest.fixture
def raw_catalog() -> list[dict]:
    """Create raw JSON as returned by the TheDogAPI /breeds endpoint."""
    return [
        {
            "id": 1,
            "name": "Chihuahua",
            "temperament": "Friendly, Alert",
            "weight": {"imperial": "3 - 6", "metric": "1 - 3"},
            "height": {"imperial": "5 - 8", "metric": "13 - 20"},
            "life_span": "12 - 20 years",
            "breed_group": "Toy",
            "reference_image_id": "abc",
        },
        {
            "id": 2,
            "name": "Great Dane",
            "temperament": "Friendly, Loyal",
            "weight": {"imperial": "110 - 175", "metric": "50 - 79"},
            "height": {"imperial": "28 - 32", "metric": "71 - 81"},
            "life_span": "7 - 10 years",
            "breed_group": "Working",
        },
    ]


@pytest.fixture
def sample_search_response(chihuahua: BreedRecord) -> SearchResponse:
    """Create a sample SearchResponse for testing."""
    return SearchResponse(
        query="friendly dogs at most 20 lbs",
        results=[ScoredBreed.model_validate({**chihuahua.model_dump(), "match_score": 25})],
        total=1,
        search_time_ms=1.2,
    )


@pytest.fixture
def mock_catalog(catalog_breeds: list[BreedRecord]) -> MagicMock:
    """Create a mock BreedCatalog serving the fixture catalog."""
    mock = MagicMock()
    mock.get_breeds.return_value = catalog_breeds
    return mock


@pytest.fixture
def tmp_data_dir(tmp_path: Path) -> Path:
    """Create a temporary data directory structure."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    return data_dir


@pytest.fixture
def breed_factory() -> Callable[..., BreedRecord]:
    """Expose make_breed to tests that need custom records."""
    return make_breed
