"""Personalized ranking of locations."""

from collections.abc import Collection

import logfire

from explora.config import PersonalizationSettings
from explora.domain.model.location import Location
from explora.domain.model.user_profile import UserProfile

from .base import Service


class PersonalizationService(Service):
    """Ranks locations by how well their tags match a user's preferences.

    Matching is exact: preferred tags are canonical registry strings picked
    during onboarding, so no case folding or fuzzy matching happens here.
    """

    def __init__(self, settings: PersonalizationSettings) -> None:
        self.settings = settings

    def score(
        self,
        location: Location,
        preferred_tags: Collection[str],
        favorite_ids: Collection[str] = frozenset(),
    ) -> int:
        """Personalization score of a single location.

        Args:
            location: Location to score
            preferred_tags: User's preferred tags
            favorite_ids: Ids of the user's favorite locations

        Returns:
            Score, at least the base score
        """
        s = self.settings
        preferred = set(preferred_tags)

        primary_matches = sum(1 for tag in location.tags.primary if tag in preferred)
        secondary_matches = sum(1 for tag in location.tags.secondary if tag in preferred)
        total_matches = primary_matches + secondary_matches

        score = s.base_score
        score += primary_matches * s.primary_match_points
        score += secondary_matches * s.secondary_match_points

        if total_matches >= s.strong_match_threshold:
            score += s.strong_match_bonus
        elif total_matches == s.partial_match_threshold:
            score += s.partial_match_bonus

        if location.id in favorite_ids:
            score += s.favorite_bonus

        return score

    def score_for_profile(
        self,
        location: Location,
        profile: UserProfile | None,
        favorite_ids: Collection[str] = frozenset(),
    ) -> int:
        """Score a location for a user profile (anonymous users have none)."""
        preferred = profile.travel_style.preferred_tags if profile else []
        return self.score(location, preferred, favorite_ids)

    def rank(
        self,
        locations: list[Location],
        preferred_tags: Collection[str],
        favorite_ids: Collection[str] = frozenset(),
    ) -> list[Location]:
        """Sort locations by descending score, then alphabetically by name.

        Args:
            locations: Locations to rank
            preferred_tags: User's preferred tags
            favorite_ids: Ids of the user's favorite locations

        Returns:
            New list, best match first
        """
        with logfire.span("personalization_service.rank", count=len(locations)):
            scores = {
                loc.id: self.score(loc, preferred_tags, favorite_ids) for loc in locations
            }
            # Name, then raw name and id, so equal scores always sort the same way
            return sorted(
                locations,
                key=lambda loc: (-scores[loc.id], loc.name.casefold(), loc.name, loc.id),
            )
