"""Unit tests for QualityService."""

import pytest

from explora.config import PerformanceSettings, QualitySettings
from explora.domain.registry import VIENNA_TAXONOMY
from explora.domain.service import CategoryService, PerformanceService, QualityService
from tests.conftest import make_location, make_tags


def sparse_location(location_id: str = "sparse", name: str = "Sparse"):
    """Valid location worth exactly 92 points."""
    return make_location(
        location_id,
        name,
        tags=make_tags(
            primary=["Art Museums", "Urban Parks", "Rooftop Views"],
            secondary=["1-Hour Visit", "Indoor"],
            hidden=[],
            contextual=[],
        ),
    )


def poor_location(location_id: str = "poor", name: str = "Poor"):
    """Invalid location with a single primary tag."""
    return make_location(
        location_id,
        name,
        tags=make_tags(primary=["Art Museums"], secondary=[], hidden=[], contextual=[]),
    )


class TestScore:
    """Tests for score method."""

    def test_sparse_cross_category_location_scores_92(self, quality_service):
        """40 valid + 24 primary + 8 secondary + 20 diversity."""
        assert quality_service.score(sparse_location()) == 92

    def test_score_is_clamped_to_100(self, quality_service):
        """A fully tagged location adds up to 140 before clamping."""
        location = make_location(
            tags=make_tags(
                primary=[
                    "Art Museums",
                    "Urban Parks",
                    "Rooftop Views",
                    "Historical Sites",
                    "Street Art",
                ],
                secondary=[
                    "1-Hour Visit",
                    "Indoor",
                    "Walkable From Center",
                    "Solo-Friendly",
                    "Kid-Friendly",
                ],
            )
        )

        assert quality_service.score(location) == 100

    def test_errors_forfeit_validity_points(self, quality_service):
        """8 primary + 1/3 of 20 diversity, rounded."""
        assert quality_service.score(poor_location()) == 15

    def test_single_category_rounds_fractional_diversity(self, quality_service):
        """40 + 24 + 16 + 6.67 rounds up to 87."""
        location = make_location(
            tags=make_tags(
                primary=["Art Museums", "History Museums", "Science Museums"],
                hidden=[],
                contextual=[],
            )
        )

        assert quality_service.score(location) == 87

    def test_half_points_round_up(self, validation_service):
        """80.5 becomes 81, not the even neighbour."""
        service = QualityService(
            validation_service=validation_service,
            category_service=CategoryService(
                taxonomy=VIENNA_TAXONOMY, diversity_saturation=2
            ),
            performance_service=PerformanceService(settings=PerformanceSettings()),
            settings=QualitySettings(diversity_points=1),
        )
        location = make_location(
            tags=make_tags(
                primary=["Art Museums", "History Museums", "Science Museums"],
                hidden=[],
                contextual=[],
            )
        )

        assert service.score(location) == 81

    def test_score_is_deterministic(self, quality_service):
        location = sparse_location()

        assert quality_service.score(location) == quality_service.score(location)


class TestValidateWithQualityControl:
    """Tests for validate_with_quality_control method."""

    def test_reports_breakdown_and_score(self, quality_service):
        result = quality_service.validate_with_quality_control(sparse_location())

        assert result.is_valid
        assert result.location_id == "sparse"
        assert result.quality_score == 92
        assert result.tag_breakdown.primary.count == 3
        assert result.tag_breakdown.secondary.coverage == [
            "Time Commitment",
            "Weather Suitability",
        ]
        assert result.tag_breakdown.hidden.count == 0
        assert result.cross_category_analysis.diversity == 1.0
        assert (
            "Excellent cross-category diversity! This will improve discoverability"
            in result.suggestions
        )

    def test_single_category_suggests_other_categories(self, quality_service):
        location = make_location(
            tags=make_tags(primary=["Art Museums", "History Museums", "Science Museums"])
        )

        result = quality_service.validate_with_quality_control(location)

        assert result.suggestions == [
            "Consider adding tags from other categories for richer description"
        ]

    def test_invalid_location_keeps_errors(self, quality_service):
        result = quality_service.validate_with_quality_control(poor_location())

        assert not result.is_valid
        assert "Minimum 3 primary tags required. Current: 1" in result.errors


class TestBuildReport:
    """Tests for build_report method."""

    def test_empty_catalog(self, quality_service):
        report = quality_service.build_report([])

        assert report.total_locations == 0
        assert report.average_quality == 0
        assert report.top_quality == []
        assert report.needs_improvement == []
        assert len(report.performance_analysis.recommendations) == 3

    def test_buckets_locations_by_score(self, quality_service):
        locations = [
            sparse_location(),
            poor_location(),
            make_location("rich", "Rich"),
        ]

        report = quality_service.build_report(locations)

        assert report.total_locations == 3
        assert report.valid_locations == 2
        assert report.cross_category_locations == 2
        assert [r.location_id for r in report.top_quality] == ["rich", "sparse"]
        assert [r.location_id for r in report.needs_improvement] == ["poor"]
        # (100 + 92 + 15) / 3 = 69
        assert report.average_quality == 69


class TestFilterByQuality:
    """Tests for filter_by_quality method."""

    def test_inclusive_range_best_first(self, quality_service):
        locations = [poor_location(), sparse_location(), make_location("rich", "Rich")]

        results = quality_service.filter_by_quality(locations, min_score=15, max_score=92)

        assert [r.location_id for r in results] == ["sparse", "poor"]

    def test_reversed_range_is_rejected(self, quality_service):
        with pytest.raises(ValueError, match="min_score"):
            quality_service.filter_by_quality([], min_score=90, max_score=10)
