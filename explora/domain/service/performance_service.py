"""Catalog performance heuristics."""

from explora.config import PerformanceSettings
from explora.domain.model.analysis import PerformanceConcerns
from explora.domain.model.location import Location

from .base import Service

BASE_RECOMMENDATIONS = (
    "Implement Firestore composite indexes for common tag combinations",
    "Consider tag popularity scoring for search optimization",
    "Plan tag hierarchy caching for frequent queries",
)

LARGE_CATALOG_RECOMMENDATIONS = (
    "Implement pagination for tag-based queries",
    "Consider tag denormalization for performance",
)


class PerformanceService(Service):
    """Turns aggregate tag statistics into advisory notes.

    Purely informational: nothing here touches indexes or queries.
    """

    def __init__(self, settings: PerformanceSettings) -> None:
        self.settings = settings

    def analyze(self, locations: list[Location]) -> PerformanceConcerns:
        """Analyze tag usage across a catalog.

        Args:
            locations: Catalog to analyze

        Returns:
            Indexing, query and scalability concerns plus recommendations
        """
        s = self.settings
        total_tags = sum(location.tags.total_count() for location in locations)
        average_tags = total_tags / len(locations) if locations else 0.0
        unique_primary = len({tag for loc in locations for tag in loc.tags.primary})

        indexing: list[str] = []
        queries: list[str] = []
        scalability: list[str] = []
        recommendations = list(BASE_RECOMMENDATIONS)

        if unique_primary > s.primary_tag_variety_threshold:
            indexing.append(
                f"High primary tag variety ({unique_primary}). "
                "Consider composite indexes."
            )

        if average_tags > s.tags_per_location_threshold:
            queries.append(
                f"High average tags per location ({average_tags:.1f}). "
                "May impact query performance."
            )

        if len(locations) > s.scalability_location_threshold:
            scalability.append("Approaching scale where caching layer becomes critical")

        if len(locations) > s.pagination_location_threshold:
            recommendations.extend(LARGE_CATALOG_RECOMMENDATIONS)

        return PerformanceConcerns(
            indexing_concerns=indexing,
            query_concerns=queries,
            scalability_concerns=scalability,
            recommendations=recommendations,
        )
