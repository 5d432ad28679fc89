"""Tag taxonomy: categories, groups and mood mappings."""

from explora.domain.model.common import DomainModel
from explora.domain.value import Mood


class TagCategory(DomainModel):
    """A named, ordered group of tags.

    Used both for primary categories (e.g. "Culture & History") and for
    secondary tag groups (e.g. "Time Commitment").
    """

    key: str  # Stable identifier, e.g. CULTURE_HISTORY
    name: str  # Display name
    tags: tuple[str, ...]


class MoodProfile(DomainModel):
    """A mood with the tag or category name fragments it maps to."""

    mood: Mood
    description: str
    fragments: tuple[str, ...]


class TagTaxonomy(DomainModel):
    """Registry of every tag a location may carry.

    Lookups iterate in registry order, which is also the order used to
    break ties (e.g. the dominant category of a location).
    """

    primary_categories: tuple[TagCategory, ...]
    secondary_groups: tuple[TagCategory, ...]
    hidden_tags: tuple[str, ...]
    contextual_tags: tuple[str, ...]
    moods: tuple[MoodProfile, ...]

    def primary_category_names(self) -> list[str]:
        """Names of all primary categories in registry order."""
        return [category.name for category in self.primary_categories]

    def tags_for_category(self, category_name: str) -> list[str]:
        """Tags of a primary category, or an empty list if unknown."""
        for category in self.primary_categories:
            if category.name == category_name:
                return list(category.tags)
        return []

    def all_primary_tags(self) -> list[str]:
        """Every primary tag once, in registry order."""
        return list(dict.fromkeys(t for c in self.primary_categories for t in c.tags))

    def all_secondary_tags(self) -> list[str]:
        """Every secondary tag once, in registry order."""
        return list(dict.fromkeys(t for g in self.secondary_groups for t in g.tags))

    def is_primary_tag(self, tag: str) -> bool:
        return any(tag in category.tags for category in self.primary_categories)

    def is_secondary_tag(self, tag: str) -> bool:
        return any(tag in group.tags for group in self.secondary_groups)

    def categories_for_tags(self, tags: list[str]) -> dict[str, list[str]]:
        """Group tags by the primary categories that own them.

        A tag listed under several categories appears under each of them.
        Unknown tags are dropped. Keys follow registry order; tags within a
        category keep their input order.
        """
        grouped: dict[str, list[str]] = {}
        for category in self.primary_categories:
            matched = [tag for tag in tags if tag in category.tags]
            if matched:
                grouped[category.name] = matched
        return grouped

    def secondary_groups_for_tags(self, tags: list[str]) -> list[str]:
        """Names of the secondary groups represented among the tags."""
        return [
            group.name
            for group in self.secondary_groups
            if any(tag in group.tags for tag in tags)
        ]

    def mood_profile(self, mood: Mood) -> MoodProfile | None:
        for profile in self.moods:
            if profile.mood == mood:
                return profile
        return None

    def tags_for_mood(self, mood: Mood) -> list[str]:
        """Fragments mapped to a mood, or an empty list if unmapped."""
        profile = self.mood_profile(mood)
        return list(profile.fragments) if profile else []
