"""Unit tests for MoodService."""

import pytest

from explora.domain.registry import VIENNA_TAXONOMY
from explora.domain.service import MoodService
from explora.domain.value import Mood
from tests.conftest import make_location, make_tags


@pytest.fixture
def service() -> MoodService:
    return MoodService(taxonomy=VIENNA_TAXONOMY)


class TestMatchesMood:
    """Tests for matches_mood method."""

    def test_exact_tag_matches(self, service):
        assert service.matches_mood(["Shaded Areas"], Mood.PEACEFUL)

    def test_matching_ignores_case(self, service):
        assert service.matches_mood(["shaded AREAS"], Mood.PEACEFUL)

    def test_tag_inside_fragment_matches(self, service):
        """"Sunset" is part of the Romantic fragment "Sunset Spots"."""
        assert service.matches_mood(["Sunset"], Mood.ROMANTIC)

    def test_fragment_inside_tag_matches(self, service):
        assert service.matches_mood(["Hidden Calm Walks Loop"], Mood.PEACEFUL)

    def test_unrelated_tags_do_not_match(self, service):
        assert not service.matches_mood(["Art Museums", "Indoor"], Mood.ADVENTUROUS)

    def test_blank_tags_are_ignored(self, service):
        """An empty string would otherwise be a substring of every fragment."""
        assert not service.matches_mood(["", "   "], Mood.CURIOUS)

    def test_every_mood_has_fragments(self, service):
        for mood in Mood:
            assert service.tags_for_mood(mood)


class TestFilterByMood:
    """Tests for filter_by_mood method."""

    def test_secondary_tag_can_trigger_match(self, service):
        location = make_location(
            tags=make_tags(
                primary=["Art Museums", "History Museums", "Science Museums"],
                secondary=["Shaded Areas"],
                hidden=[],
                contextual=[],
            )
        )

        assert service.filter_by_mood([location], Mood.PEACEFUL) == [location]

    def test_hidden_and_contextual_tags_count(self, service):
        location = make_location(
            tags=make_tags(
                primary=["Art Museums"],
                secondary=["Indoor"],
                hidden=["Quiet Retreat"],
                contextual=[],
            )
        )

        assert service.filter_by_mood([location], Mood.CONTEMPLATIVE) == [location]

    def test_keeps_input_order(self, service):
        first = make_location("first", "Zoo Walk", tags=make_tags(primary=["Calm Walks"]))
        museum = make_location(
            "museum",
            "Museum",
            tags=make_tags(primary=["Art Museums"], secondary=["Indoor"], hidden=[]),
        )
        last = make_location("last", "A Park", tags=make_tags(primary=["Shaded Areas"]))

        result = service.filter_by_mood([first, museum, last], Mood.PEACEFUL)

        assert [loc.id for loc in result] == ["first", "last"]

    def test_moods_in_display_order(self, service):
        assert [p.mood for p in service.moods()] == list(Mood)
