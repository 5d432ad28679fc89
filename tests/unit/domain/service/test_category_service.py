"""Unit tests for CategoryService."""

import pytest

from explora.domain.registry import VIENNA_TAXONOMY
from explora.domain.service import CategoryService


class TestAnalyze:
    """Tests for analyze method."""

    def test_three_categories_saturate_diversity(self, category_service):
        analysis = category_service.analyze(["Art Museums", "Urban Parks", "Rooftop Views"])

        assert analysis.diversity == 1.0
        assert list(analysis.categories) == [
            "Museums & Art",
            "Parks & Nature",
            "Scenic & Panoramic",
        ]

    def test_categories_follow_registry_order(self, category_service):
        """Input order of tags should not change category order."""
        analysis = category_service.analyze(["Rooftop Views", "Historical Sites"])

        assert list(analysis.categories) == ["Culture & History", "Scenic & Panoramic"]

    def test_dominant_category_has_most_tags(self, category_service):
        analysis = category_service.analyze(
            ["Urban Parks", "Calm Walks", "Shaded Areas", "Historical Sites"]
        )

        assert analysis.dominant_category == "Parks & Nature"
        assert analysis.categories["Parks & Nature"] == [
            "Urban Parks",
            "Calm Walks",
            "Shaded Areas",
        ]

    def test_dominant_category_tie_goes_to_first_registry_category(
        self, category_service
    ):
        """Two tags each in Parks & Nature and Culture & History."""
        analysis = category_service.analyze(
            ["Urban Parks", "Calm Walks", "Historical Sites", "Memorials"]
        )

        assert analysis.dominant_category == "Culture & History"

    def test_shared_tag_counts_for_every_owning_category(self, category_service):
        """Graffiti Corridors is listed under two categories."""
        analysis = category_service.analyze(["Graffiti Corridors"])

        assert list(analysis.categories) == [
            "Urban Exploration",
            "Creative & Street Culture",
        ]
        assert analysis.dominant_category == "Urban Exploration"

    def test_unknown_tags_are_ignored(self, category_service):
        analysis = category_service.analyze(["Moon Base"])

        assert analysis.categories == {}
        assert analysis.diversity == 0.0
        assert analysis.dominant_category is None


class TestDiversity:
    """Tests for diversity method."""

    @pytest.mark.parametrize(
        ("category_count", "expected"),
        [(0, 0.0), (1, 1 / 3), (2, 2 / 3), (3, 1.0), (6, 1.0)],
    )
    def test_diversity_saturates_at_three_categories(
        self, category_service, category_count, expected
    ):
        assert category_service.diversity(category_count) == pytest.approx(expected)

    def test_diversity_never_decreases(self, category_service):
        scores = [category_service.diversity(n) for n in range(8)]

        assert scores == sorted(scores)

    def test_custom_saturation(self):
        service = CategoryService(taxonomy=VIENNA_TAXONOMY, diversity_saturation=2)

        assert service.diversity(1) == 0.5
        assert service.diversity(2) == 1.0

    def test_saturation_must_be_positive(self):
        with pytest.raises(ValueError, match="diversity_saturation"):
            CategoryService(taxonomy=VIENNA_TAXONOMY, diversity_saturation=0)
