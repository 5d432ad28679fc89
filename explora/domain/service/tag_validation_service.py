"""Tag validation domain service."""

import logfire

from explora.config import TaggingSettings
from explora.domain.model.analysis import (
    CatalogValidationReport,
    TagBreakdownStats,
    TaggingAnalysis,
    TaggingStats,
    TagValidationResult,
)
from explora.domain.model.location import Location, LocationTags
from explora.domain.model.taxonomy import TagTaxonomy

from .base import Service


class TagValidationService(Service):
    """Checks location tags against the taxonomy and count rules.

    Errors mean the location must not be accepted into the catalog.
    Warnings are advisory and never block.
    """

    def __init__(self, taxonomy: TagTaxonomy, rules: TaggingSettings) -> None:
        """Initialize tag validation service.

        Args:
            taxonomy: Tag registry to validate against
            rules: Count bounds and required secondary groups
        """
        self.taxonomy = taxonomy
        self.rules = rules

    def validate(self, tags: LocationTags) -> TagValidationResult:
        """Validate a location's tag layers.

        Args:
            tags: Tags to validate

        Returns:
            Errors and warnings, in rule order
        """
        errors: list[str] = []
        warnings: list[str] = []
        rules = self.rules

        # Primary: 3-5 tags from any category
        primary_count = len(tags.primary)
        if primary_count < rules.min_primary_tags:
            errors.append(
                f"Minimum {rules.min_primary_tags} primary tags required. "
                f"Current: {primary_count}"
            )
        if primary_count > rules.max_primary_tags:
            errors.append(
                f"Maximum {rules.max_primary_tags} primary tags allowed. "
                f"Current: {primary_count}"
            )

        invalid_primary = [t for t in tags.primary if not self.taxonomy.is_primary_tag(t)]
        if invalid_primary:
            errors.append(f"Invalid primary tags: {', '.join(invalid_primary)}")

        used_categories = list(self.taxonomy.categories_for_tags(tags.primary))
        if len(used_categories) == 1 and primary_count >= rules.min_primary_tags:
            warnings.append(
                f"All primary tags from same category ({used_categories[0]}). "
                "Consider cross-category tags for richer location description."
            )

        # Secondary: below the minimum blocks, above the maximum only warns
        secondary_count = len(tags.secondary)
        if secondary_count < rules.min_secondary_tags:
            errors.append(
                f"Minimum {rules.min_secondary_tags} secondary tags required "
                "for location card display"
            )
        if secondary_count > rules.max_secondary_tags:
            warnings.append(
                f"Maximum {rules.max_secondary_tags} secondary tags shown on "
                "location cards. Consider moving extras to hidden layer"
            )

        invalid_secondary = [
            t for t in tags.secondary if not self.taxonomy.is_secondary_tag(t)
        ]
        if invalid_secondary:
            errors.append(f"Invalid secondary tags: {', '.join(invalid_secondary)}")

        covered = self.taxonomy.secondary_groups_for_tags(tags.secondary)
        missing = [g for g in rules.required_secondary_groups if g not in covered]
        if missing:
            warnings.append(
                f"Consider adding tags from categories: {', '.join(missing)}"
            )

        # Hidden and contextual layers are soft
        if len(tags.hidden) < rules.min_hidden_tags:
            warnings.append(
                "Recommend 2-4 hidden tags for better algorithmic recommendations"
            )
        if len(tags.hidden) > rules.max_hidden_tags:
            warnings.append(
                "Too many hidden tags. Keep only the most relevant algorithmic insights"
            )

        if not tags.contextual:
            warnings.append(
                "Consider adding contextual tags for seasonal/timing recommendations"
            )
        if len(tags.contextual) > rules.max_contextual_tags:
            warnings.append(
                "Too many contextual tags. Focus on the most important timing factors"
            )

        return TagValidationResult(errors=errors, warnings=warnings)

    def analyze_tagging(self, location: Location) -> TaggingAnalysis:
        """Validate a location and summarize its tag counts.

        Args:
            location: Location to analyze

        Returns:
            Validation result, per-layer statistics and the 3+ visible tag rule
        """
        tags = location.tags
        return TaggingAnalysis(
            name=location.name,
            category=location.category,
            validation=self.validate(tags),
            stats=TaggingStats(
                total_visible=tags.visible_count(),
                total_tags=tags.total_count(),
                breakdown=TagBreakdownStats(
                    primary=len(tags.primary),
                    secondary=len(tags.secondary),
                    hidden=len(tags.hidden),
                    contextual=len(tags.contextual),
                ),
            ),
            meets_three_plus_rule=tags.visible_count() >= 3,
        )

    def validate_catalog(self, locations: list[Location]) -> CatalogValidationReport:
        """Run the tagging analysis over a whole catalog.

        Args:
            locations: Locations to analyze

        Returns:
            Per-location analyses with summary counts
        """
        with logfire.span(
            "tag_validation_service.validate_catalog", count=len(locations)
        ):
            results = [self.analyze_tagging(location) for location in locations]
            report = CatalogValidationReport(
                total_locations=len(results),
                meets_three_plus_rule=sum(1 for r in results if r.meets_three_plus_rule),
                with_errors=sum(1 for r in results if r.validation.errors),
                with_warnings=sum(1 for r in results if r.validation.warnings),
                results=results,
            )
            logfire.info(
                "Catalog validated",
                total=report.total_locations,
                with_errors=report.with_errors,
                with_warnings=report.with_warnings,
            )
            return report
