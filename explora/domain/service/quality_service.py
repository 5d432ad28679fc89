"""Tagging quality control domain service."""

import math

import logfire

from explora.config import QualitySettings
from explora.domain.model.analysis import (
    ContextualBreakdown,
    CrossCategoryAnalysis,
    HiddenBreakdown,
    LocationValidationResult,
    PrimaryBreakdown,
    QualityReport,
    SecondaryBreakdown,
    TagBreakdown,
    TagValidationResult,
)
from explora.domain.model.location import Location

from .base import Service
from .category_service import CategoryService
from .performance_service import PerformanceService
from .tag_validation_service import TagValidationService


class QualityService(Service):
    """Scores how complete and rich a location's tagging is.

    The admin dashboard and catalog imports both go through this service,
    so a location is judged the same way everywhere.
    """

    def __init__(
        self,
        validation_service: TagValidationService,
        category_service: CategoryService,
        performance_service: PerformanceService,
        settings: QualitySettings,
    ) -> None:
        """Initialize quality service.

        Args:
            validation_service: Tag validator
            category_service: Cross-category analyzer
            performance_service: Catalog performance analyzer
            settings: Score weights and report thresholds
        """
        self.validation_service = validation_service
        self.category_service = category_service
        self.performance_service = performance_service
        self.settings = settings

    def score(self, location: Location) -> int:
        """Quality score of a location, an integer in [0, max_score].

        Args:
            location: Location to score

        Returns:
            Rounded and clamped quality score
        """
        validation = self.validation_service.validate(location.tags)
        analysis = self.category_service.analyze(location.tags.primary)
        return self._compute_score(location, validation, analysis)

    def _compute_score(
        self,
        location: Location,
        validation: TagValidationResult,
        analysis: CrossCategoryAnalysis,
    ) -> int:
        s = self.settings
        tags = location.tags

        raw = 0.0
        raw += s.validity_points if not validation.errors else 0
        raw += min(len(tags.primary) * s.primary_tag_points, s.primary_tag_cap)
        raw += min(len(tags.secondary) * s.secondary_tag_points, s.secondary_tag_cap)
        raw += analysis.diversity * s.diversity_points
        raw += s.hidden_tag_bonus if tags.hidden else 0
        raw += s.contextual_tag_bonus if tags.contextual else 0

        # The weights can add up past max_score, so clamp after rounding
        rounded = math.floor(raw + 0.5)
        return max(0, min(rounded, s.max_score))

    def validate_with_quality_control(self, location: Location) -> LocationValidationResult:
        """Validate a location and explain its quality score.

        Args:
            location: Location to check

        Returns:
            Validation verdict, suggestions, category analysis, per-layer
            breakdown and quality score
        """
        tags = location.tags
        validation = self.validation_service.validate(tags)
        analysis = self.category_service.analyze(tags.primary)
        category_count = len(analysis.categories)

        suggestions: list[str] = []
        if category_count == 1:
            suggestions.append(
                "Consider adding tags from other categories for richer description"
            )
        if category_count >= self.category_service.diversity_saturation:
            suggestions.append(
                "Excellent cross-category diversity! This will improve discoverability"
            )

        taxonomy = self.validation_service.taxonomy
        return LocationValidationResult(
            location_id=location.id,
            location_name=location.name,
            is_valid=not validation.errors,
            errors=validation.errors,
            warnings=validation.warnings,
            suggestions=suggestions,
            cross_category_analysis=analysis,
            tag_breakdown=TagBreakdown(
                primary=PrimaryBreakdown(
                    count=len(tags.primary), categories=list(analysis.categories)
                ),
                secondary=SecondaryBreakdown(
                    count=len(tags.secondary),
                    coverage=taxonomy.secondary_groups_for_tags(tags.secondary),
                ),
                hidden=HiddenBreakdown(count=len(tags.hidden), insights=list(tags.hidden)),
                contextual=ContextualBreakdown(
                    count=len(tags.contextual), timing=list(tags.contextual)
                ),
            ),
            quality_score=self._compute_score(location, validation, analysis),
        )

    def build_report(self, locations: list[Location]) -> QualityReport:
        """Summarize the quality of a whole catalog.

        Args:
            locations: Locations to analyze

        Returns:
            Totals, best and worst locations, and performance advisories
        """
        s = self.settings
        with logfire.span("quality_service.build_report", count=len(locations)):
            results = [self.validate_with_quality_control(loc) for loc in locations]

            average = (
                sum(r.quality_score for r in results) / len(results) if results else 0.0
            )
            top_quality = sorted(
                (r for r in results if r.quality_score >= s.top_quality_threshold),
                key=lambda r: r.quality_score,
                reverse=True,
            )[: s.top_quality_limit]
            needs_improvement = sorted(
                (r for r in results if r.quality_score < s.needs_improvement_threshold),
                key=lambda r: r.quality_score,
            )[: s.needs_improvement_limit]

            report = QualityReport(
                total_locations=len(results),
                valid_locations=sum(1 for r in results if r.is_valid),
                average_quality=math.floor(average + 0.5),
                cross_category_locations=sum(
                    1
                    for r in results
                    if len(r.cross_category_analysis.categories)
                    >= s.cross_category_min_categories
                ),
                top_quality=top_quality,
                needs_improvement=needs_improvement,
                performance_analysis=self.performance_service.analyze(locations),
            )
            logfire.info(
                "Quality report built",
                total=report.total_locations,
                valid=report.valid_locations,
                average_quality=report.average_quality,
            )
            return report

    def filter_by_quality(
        self, locations: list[Location], min_score: int = 0, max_score: int = 100
    ) -> list[LocationValidationResult]:
        """Quality results within an inclusive score range, best first."""
        if min_score > max_score:
            raise ValueError("min_score must not exceed max_score")
        results = [self.validate_with_quality_control(loc) for loc in locations]
        return sorted(
            (r for r in results if min_score <= r.quality_score <= max_score),
            key=lambda r: r.quality_score,
            reverse=True,
        )
