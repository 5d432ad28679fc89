"""Unit tests for TagValidationService."""

import pytest

from explora.domain.registry import VIENNA_TAXONOMY
from tests.conftest import make_location, make_tags

PRIMARY_POOL = VIENNA_TAXONOMY.all_primary_tags()


class TestValidate:
    """Tests for validate method."""

    def test_well_tagged_location_has_no_findings(self, validation_service):
        """Tags covering every rule should produce neither errors nor warnings."""
        result = validation_service.validate(make_tags())

        assert result.errors == []
        assert result.warnings == []
        assert result.is_valid

    @pytest.mark.parametrize("count", [3, 4, 5])
    def test_primary_count_within_bounds_is_valid(self, validation_service, count):
        """Any 3-5 registry tags should pass the primary rule."""
        tags = make_tags(primary=PRIMARY_POOL[:count])

        result = validation_service.validate(tags)

        assert result.errors == []

    @pytest.mark.parametrize("count", [0, 1, 2, 6, 7])
    def test_primary_count_out_of_bounds_is_an_error(self, validation_service, count):
        """Fewer than 3 or more than 5 primary tags should block the location."""
        tags = make_tags(primary=PRIMARY_POOL[:count])

        result = validation_service.validate(tags)

        assert any("primary tags" in error for error in result.errors)
        assert not result.is_valid

    def test_too_few_primary_tags_reports_current_count(self, validation_service):
        result = validation_service.validate(make_tags(primary=["Art Museums"]))

        assert "Minimum 3 primary tags required. Current: 1" in result.errors

    def test_too_many_primary_tags_reports_current_count(self, validation_service):
        result = validation_service.validate(make_tags(primary=PRIMARY_POOL[:6]))

        assert "Maximum 5 primary tags allowed. Current: 6" in result.errors

    def test_unknown_primary_tags_are_listed(self, validation_service):
        """Tags outside the registry should be named in one error."""
        tags = make_tags(primary=["Art Museums", "Moon Base", "Lava Caves"])

        result = validation_service.validate(tags)

        assert "Invalid primary tags: Moon Base, Lava Caves" in result.errors

    def test_single_category_primary_tags_warn(self, validation_service):
        """Primary tags from one category should suggest cross-category tags."""
        tags = make_tags(primary=["Art Museums", "History Museums", "Science Museums"])

        result = validation_service.validate(tags)

        assert result.errors == []
        assert any(
            w.startswith("All primary tags from same category (Museums & Art)")
            for w in result.warnings
        )

    def test_too_few_secondary_tags_is_an_error(self, validation_service):
        result = validation_service.validate(make_tags(secondary=["Indoor"]))

        assert (
            "Minimum 2 secondary tags required for location card display"
            in result.errors
        )

    def test_too_many_secondary_tags_only_warns(self, validation_service):
        """More than 5 secondary tags should not block the location."""
        tags = make_tags(
            secondary=[
                "1-Hour Visit",
                "Indoor",
                "Walkable From Center",
                "Solo-Friendly",
                "Kid-Friendly",
                "Good for Rainy Days",
            ]
        )

        result = validation_service.validate(tags)

        assert result.errors == []
        assert any("Maximum 5 secondary tags" in w for w in result.warnings)

    def test_unknown_secondary_tags_are_listed(self, validation_service):
        tags = make_tags(secondary=["Indoor", "Jetpack Required"])

        result = validation_service.validate(tags)

        assert "Invalid secondary tags: Jetpack Required" in result.errors

    def test_missing_secondary_groups_warn(self, validation_service):
        """Uncovered required groups should be listed in registry order."""
        tags = make_tags(secondary=["1-Hour Visit", "Indoor"])

        result = validation_service.validate(tags)

        assert (
            "Consider adding tags from categories: Mobility Context, Audience Suitability"
            in result.warnings
        )

    def test_hidden_and_contextual_layers_only_warn(self, validation_service):
        """Empty or overfull soft layers should never become errors."""
        sparse = validation_service.validate(make_tags(hidden=[], contextual=[]))
        crowded = validation_service.validate(
            make_tags(
                hidden=["FOMO Magnet"] * 7,
                contextual=["Event Nearby"] * 5,
            )
        )

        assert sparse.errors == []
        assert crowded.errors == []
        assert (
            "Recommend 2-4 hidden tags for better algorithmic recommendations"
            in sparse.warnings
        )
        assert (
            "Consider adding contextual tags for seasonal/timing recommendations"
            in sparse.warnings
        )
        assert any("Too many hidden tags" in w for w in crowded.warnings)
        assert any("Too many contextual tags" in w for w in crowded.warnings)

    def test_sparse_cross_category_location(self, validation_service):
        """Three categories with thin secondary coverage: valid, but with advice."""
        tags = make_tags(
            primary=["Art Museums", "Urban Parks", "Rooftop Views"],
            secondary=["1-Hour Visit", "Indoor"],
            hidden=[],
            contextual=[],
        )

        result = validation_service.validate(tags)

        assert result.errors == []
        assert len(result.warnings) >= 3


class TestAnalyzeTagging:
    """Tests for analyze_tagging method."""

    def test_counts_tags_per_layer(self, validation_service):
        location = make_location(category="Museum")

        analysis = validation_service.analyze_tagging(location)

        assert analysis.name == "Test Location"
        assert analysis.category == "Museum"
        assert analysis.stats.total_visible == 7
        assert analysis.stats.total_tags == 10
        assert analysis.stats.breakdown.hidden == 2
        assert analysis.meets_three_plus_rule

    def test_three_plus_rule_counts_visible_tags_only(self, validation_service):
        """Hidden and contextual tags don't help a card reach three tags."""
        location = make_location(
            tags=make_tags(primary=["Art Museums"], secondary=["Indoor"])
        )

        analysis = validation_service.analyze_tagging(location)

        assert not analysis.meets_three_plus_rule


class TestValidateCatalog:
    """Tests for validate_catalog method."""

    def test_summarizes_catalog(self, validation_service):
        locations = [
            make_location("good", "Good"),
            make_location("thin", "Thin", tags=make_tags(hidden=[])),
            make_location("broken", "Broken", tags=make_tags(primary=["Art Museums"])),
        ]

        report = validation_service.validate_catalog(locations)

        assert report.total_locations == 3
        assert report.with_errors == 1
        assert report.with_warnings == 1
        assert report.meets_three_plus_rule == 3
        assert [r.name for r in report.results] == ["Good", "Thin", "Broken"]

    def test_empty_catalog(self, validation_service):
        report = validation_service.validate_catalog([])

        assert report.total_locations == 0
        assert report.results == []
