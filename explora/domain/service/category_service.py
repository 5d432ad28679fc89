"""Cross-category analysis of primary tags."""

from explora.domain.model.analysis import CrossCategoryAnalysis
from explora.domain.model.taxonomy import TagTaxonomy

from .base import Service


class CategoryService(Service):
    """Measures how many primary categories a set of tags spans."""

    def __init__(self, taxonomy: TagTaxonomy, diversity_saturation: int = 3) -> None:
        """Initialize category service.

        Args:
            taxonomy: Tag registry
            diversity_saturation: Category count at which diversity reaches 1.0
        """
        if diversity_saturation < 1:
            raise ValueError("diversity_saturation must be at least 1")
        self.taxonomy = taxonomy
        self.diversity_saturation = diversity_saturation

    def categories_for_tags(self, tags: list[str]) -> dict[str, list[str]]:
        """Group tags by owning primary category (registry order)."""
        return self.taxonomy.categories_for_tags(tags)

    def diversity(self, category_count: int) -> float:
        """Diversity score for a number of distinct categories."""
        return min(category_count / self.diversity_saturation, 1.0)

    def analyze(self, primary_tags: list[str]) -> CrossCategoryAnalysis:
        """Analyze the category spread of a location's primary tags.

        The dominant category is the one with the most matched tags. Ties
        go to the category that comes first in the registry.

        Args:
            primary_tags: Primary tags of a location

        Returns:
            Tags grouped by category, diversity score and dominant category
        """
        categories = self.categories_for_tags(primary_tags)

        dominant: str | None = None
        best = 0
        for name, matched in categories.items():
            # Strict comparison keeps the earliest category on ties
            if len(matched) > best:
                dominant, best = name, len(matched)

        return CrossCategoryAnalysis(
            categories=categories,
            diversity=self.diversity(len(categories)),
            dominant_category=dominant,
        )
