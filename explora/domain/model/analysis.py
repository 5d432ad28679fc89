"""Results produced by the tagging, quality and performance analyzers.

These are read-only snapshots; nothing here is persisted.
"""

from explora.domain.model.common import DomainModel
from explora.domain.value import LocationId


class TagValidationResult(DomainModel):
    """Errors block a location from the catalog, warnings are advisory."""

    errors: list[str]
    warnings: list[str]

    @property
    def is_valid(self) -> bool:
        return not self.errors


class TagBreakdownStats(DomainModel):
    """Tag counts per layer."""

    primary: int
    secondary: int
    hidden: int
    contextual: int


class TaggingStats(DomainModel):
    total_visible: int
    total_tags: int
    breakdown: TagBreakdownStats


class TaggingAnalysis(DomainModel):
    """Validation plus tag statistics for one location."""

    name: str
    category: str
    validation: TagValidationResult
    stats: TaggingStats
    meets_three_plus_rule: bool


class CatalogValidationReport(DomainModel):
    """Tagging analysis of a whole catalog."""

    total_locations: int
    meets_three_plus_rule: int
    with_errors: int
    with_warnings: int
    results: list[TaggingAnalysis]


class CrossCategoryAnalysis(DomainModel):
    """How many primary categories a location's primary tags span."""

    categories: dict[str, list[str]]
    diversity: float  # 0-1, saturates once enough categories are spanned
    dominant_category: str | None


class PrimaryBreakdown(DomainModel):
    count: int
    categories: list[str]


class SecondaryBreakdown(DomainModel):
    count: int
    coverage: list[str]  # Secondary groups represented


class HiddenBreakdown(DomainModel):
    count: int
    insights: list[str]


class ContextualBreakdown(DomainModel):
    count: int
    timing: list[str]


class TagBreakdown(DomainModel):
    primary: PrimaryBreakdown
    secondary: SecondaryBreakdown
    hidden: HiddenBreakdown
    contextual: ContextualBreakdown


class LocationValidationResult(DomainModel):
    """Full quality-control verdict for one location."""

    location_id: LocationId
    location_name: str
    is_valid: bool
    errors: list[str]
    warnings: list[str]
    suggestions: list[str]
    cross_category_analysis: CrossCategoryAnalysis
    tag_breakdown: TagBreakdown
    quality_score: int  # 0-100


class PerformanceConcerns(DomainModel):
    """Advisory notes about catalog scale and tag usage."""

    indexing_concerns: list[str]
    query_concerns: list[str]
    scalability_concerns: list[str]
    recommendations: list[str]


class QualityReport(DomainModel):
    """Catalog-wide quality summary for the admin dashboard."""

    total_locations: int
    valid_locations: int
    average_quality: int
    cross_category_locations: int
    top_quality: list[LocationValidationResult]
    needs_improvement: list[LocationValidationResult]
    performance_analysis: PerformanceConcerns


class ImportFailure(DomainModel):
    """A catalog record that could not be imported."""

    name: str
    error: str


class ImportResult(DomainModel):
    """Outcome of a bulk catalog import."""

    imported: list[LocationId]
    failed: list[ImportFailure]
