"""Text search and category filtering over the catalog."""

import unicodedata
from collections.abc import Collection

from explora.domain.model.location import Location
from explora.domain.model.taxonomy import TagTaxonomy
from explora.domain.model.user_profile import AccessibilityPreferences

from .base import Service

ALL_CATEGORY = "All"
FAVORITES_CATEGORY = "Favorites"

WHEELCHAIR_TAG = "Wheelchair Accessible"
STAIRS_TAG = "Lots of Stairs"


def normalize(text: str) -> str:
    """Lowercase and strip diacritics ("Schönbrunn" -> "schonbrunn")."""
    decomposed = unicodedata.normalize("NFD", text.lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


class SearchService(Service):
    """Filters locations by search term, category and accessibility."""

    def __init__(self, taxonomy: TagTaxonomy) -> None:
        self.taxonomy = taxonomy

    def filter_categories(self) -> list[str]:
        """Filter chips shown above the location list."""
        return [ALL_CATEGORY, FAVORITES_CATEGORY, *self.taxonomy.primary_category_names()]

    def filter_locations(
        self,
        locations: list[Location],
        search_term: str = "",
        category: str = ALL_CATEGORY,
        favorite_ids: Collection[str] = frozenset(),
        accessibility: AccessibilityPreferences | None = None,
    ) -> list[Location]:
        """Apply category, accessibility and text filters, preserving order.

        Args:
            locations: Locations to filter
            search_term: Free text matched against names, descriptions,
                tags and addresses
            category: "All", "Favorites", a primary category name or an
                exact primary tag
            favorite_ids: Ids used by the "Favorites" category
            accessibility: Optional accessibility needs

        Returns:
            Matching locations
        """
        term = normalize(search_term.strip())
        return [
            location
            for location in locations
            if self._matches_category(location, category, favorite_ids)
            and self._matches_accessibility(location, accessibility)
            and (not term or self._matches_term(location, term))
        ]

    def _matches_category(
        self, location: Location, category: str, favorite_ids: Collection[str]
    ) -> bool:
        if category == ALL_CATEGORY:
            return True
        if category == FAVORITES_CATEGORY:
            return location.id in favorite_ids
        if category in self.taxonomy.primary_category_names():
            return category in self.taxonomy.categories_for_tags(location.tags.primary)
        return category in location.tags.primary

    @staticmethod
    def _matches_accessibility(
        location: Location, accessibility: AccessibilityPreferences | None
    ) -> bool:
        if accessibility is None:
            return True
        secondary = location.tags.secondary
        if accessibility.wheelchair_needed and WHEELCHAIR_TAG not in secondary:
            return False
        if accessibility.avoid_stairs and STAIRS_TAG in secondary:
            return False
        return True

    @staticmethod
    def _matches_term(location: Location, term: str) -> bool:
        fields = [
            location.name,
            location.description,
            location.category,
            location.address or "",
            *location.tags.primary,
            *location.tags.secondary,
        ]
        return any(term in normalize(field) for field in fields)
