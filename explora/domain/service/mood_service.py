"""Mood matching domain service."""

import logfire

from explora.domain.model.location import Location
from explora.domain.model.taxonomy import MoodProfile, TagTaxonomy
from explora.domain.value import Mood

from .base import Service


class MoodService(Service):
    """Filters locations by mood.

    Matching is deliberately loose: a mood fragment matches a tag when
    either one contains the other, ignoring case. The mood vocabulary is
    small, so exact matching would leave most moods with empty results.
    """

    def __init__(self, taxonomy: TagTaxonomy) -> None:
        self.taxonomy = taxonomy

    def moods(self) -> list[MoodProfile]:
        """All moods in display order."""
        return list(self.taxonomy.moods)

    def tags_for_mood(self, mood: Mood) -> list[str]:
        """Tag and category fragments mapped to a mood."""
        return self.taxonomy.tags_for_mood(mood)

    def matches_mood(self, location_tags: list[str], mood: Mood) -> bool:
        """Check whether any location tag overlaps any fragment of the mood.

        Blank tags are ignored; an empty string would otherwise be a
        substring of every fragment.
        """
        fragments = [f.casefold() for f in self.tags_for_mood(mood)]
        tags = [t.casefold() for t in location_tags if t.strip()]
        return any(
            fragment in tag or tag in fragment for fragment in fragments for tag in tags
        )

    def filter_by_mood(self, locations: list[Location], mood: Mood) -> list[Location]:
        """Keep locations whose tags (any layer) match the mood, in input order."""
        with logfire.span("mood_service.filter_by_mood", mood=mood.value):
            matched = [
                loc for loc in locations if self.matches_mood(loc.tags.all_tags(), mood)
            ]
            logfire.info("Mood filter applied", mood=mood.value, count=len(matched))
            return matched
