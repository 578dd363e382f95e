"""Tests for src/search/ranking.py."""

from __future__ import annotations

from collections.abc import Callable

from src.data.schemas import BreedRecord, ConstraintSet
from src.search.extractor import extract_traits
from src.search.ranking import rank_breeds


class TestRankBreeds:
    """Tests for the filter, score, sort pipeline."""

    def test_unconstrained_query_keeps_catalog_order(
        self, catalog_breeds: list[BreedRecord]
    ) -> None:
        """No constraints: every breed, original order, score 0."""
        constraints = extract_traits("any dog")
        assert constraints.is_empty()

        ranked = rank_breeds(catalog_breeds, constraints)
        assert [b.name for b in ranked] == [b.name for b in catalog_breeds]
        assert all(b.match_score == 0 for b in ranked)

    def test_friendly_light_dogs(
        self, chihuahua: BreedRecord, great_dane: BreedRecord
    ) -> None:
        """Only the Chihuahua fits; it scores 10 + 15."""
        ranked = rank_breeds([chihuahua, great_dane], extract_traits("friendly dogs at most 20 lbs"))
        assert [b.name for b in ranked] == ["Chihuahua"]
        assert ranked[0].match_score == 25

    def test_temperament_and_semantics(self, chihuahua: BreedRecord) -> None:
        """'friendly loyal' must reject a breed tagged only Friendly, Alert."""
        assert rank_breeds([chihuahua], extract_traits("friendly loyal")) == []

    def test_sorted_by_descending_score(
        self, breed_factory: Callable[..., BreedRecord]
    ) -> None:
        """Higher scores should come first."""
        plain = breed_factory("Plain Hound", temperament="Friendly")
        shepherd = breed_factory("Friendly Shepherd", temperament="Friendly, Shepherd-like")
        ranked = rank_breeds(
            [plain, shepherd], ConstraintSet(temperaments=("friendly",), free_keywords=("shepherd",))
        )
        assert [b.name for b in ranked] == ["Friendly Shepherd", "Plain Hound"]
        assert [b.match_score for b in ranked] == [18, 10]

    def test_ties_keep_catalog_order(self, breed_factory: Callable[..., BreedRecord]) -> None:
        """Equal scores should preserve input order."""
        breeds = [breed_factory(name, temperament="Calm") for name in ("Zed", "Amy", "Mo")]
        ranked = rank_breeds(breeds, ConstraintSet(temperaments=("calm",)))
        assert [b.name for b in ranked] == ["Zed", "Amy", "Mo"]

    def test_rejected_breeds_never_returned(self, catalog_breeds: list[BreedRecord]) -> None:
        """Breeds failing the filter are dropped regardless of score."""
        ranked = rank_breeds(catalog_breeds, extract_traits("at least 100 lbs"))
        assert [b.name for b in ranked] == ["Great Dane"]

    def test_idempotent(self, catalog_breeds: list[BreedRecord]) -> None:
        """Repeated calls with equal inputs give equal output."""
        constraints = extract_traits("gentle lifespan 7-20")
        assert rank_breeds(catalog_breeds, constraints) == rank_breeds(catalog_breeds, constraints)

    def test_inputs_not_mutated(self, chihuahua: BreedRecord) -> None:
        """Scoring should produce new objects, not modify the catalog."""
        rank_breeds([chihuahua], ConstraintSet(temperaments=("friendly",)))
        assert not hasattr(chihuahua, "match_score")

    def test_empty_collection(self) -> None:
        """No breeds in, no breeds out."""
        assert rank_breeds([], extract_traits("friendly")) == []

    def test_extra_catalog_fields_survive(self) -> None:
        """Unknown catalog keys should pass through to results."""
        breed = BreedRecord.model_validate({"name": "Akita", "country_code": "JP"})
        ranked = rank_breeds([breed], ConstraintSet())
        assert ranked[0].model_dump()["country_code"] == "JP"
