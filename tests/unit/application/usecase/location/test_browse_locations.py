"""Unit tests for BrowseLocationsUseCase and GetLocationUseCase."""

from datetime import date

import pytest

from explora.application.usecase.location import (
    BrowseLocationsRequest,
    BrowseLocationsUseCase,
    GetLocationRequest,
    GetLocationUseCase,
)
from explora.domain.error import NotFoundError
from explora.domain.model.user_profile import AccessibilityPreferences, TravelStyle
from explora.domain.service import FavoriteService, TripService, UserProfileService
from explora.domain.value import LocationId, Mood, UserId
from tests.harness import create_env_fixture

# Seeded Vienna catalog
catalog_env = create_env_fixture(unmock={"persistence"})

USER = UserId("user-1")


def ids(response) -> list[str]:
    return [item.id for item in response.locations]


class TestBrowseLocationsUseCase:
    """Tests for BrowseLocationsUseCase."""

    @pytest.mark.asyncio
    async def test_anonymous_browse_is_alphabetical(self, catalog_env):
        # Arrange
        use_case = await catalog_env.get(BrowseLocationsUseCase)

        # Act
        response = await use_case.execute(BrowseLocationsRequest())

        # Assert
        assert response.total == 7
        assert ids(response) == [
            "cafe-central",
            "donaukanal",
            "kahlenberg",
            "naschmarkt",
            "natural-history-museum",
            "schonbrunn-palace",
            "stadtpark",
        ]
        assert all(item.score == 1 for item in response.locations)

    @pytest.mark.asyncio
    async def test_hidden_tags_are_not_exposed(self, catalog_env):
        use_case = await catalog_env.get(BrowseLocationsUseCase)

        response = await use_case.execute(BrowseLocationsRequest())

        assert "hidden_tags" not in response.locations[0].model_dump()

    @pytest.mark.asyncio
    async def test_search_without_diacritics(self, catalog_env):
        use_case = await catalog_env.get(BrowseLocationsUseCase)

        response = await use_case.execute(BrowseLocationsRequest(search="schonbrunn"))

        assert ids(response) == ["schonbrunn-palace"]

    @pytest.mark.asyncio
    async def test_mood_filter(self, catalog_env):
        use_case = await catalog_env.get(BrowseLocationsUseCase)

        response = await use_case.execute(BrowseLocationsRequest(mood=Mood.PEACEFUL))

        assert "stadtpark" in ids(response)
        assert "natural-history-museum" not in ids(response)

    @pytest.mark.asyncio
    async def test_preferences_and_favorites_rank_first(self, catalog_env):
        # Arrange
        use_case = await catalog_env.get(BrowseLocationsUseCase)
        profiles = await catalog_env.get(UserProfileService)
        favorites = await catalog_env.get(FavoriteService)
        await profiles.update_travel_style(
            USER,
            TravelStyle(preferred_tags=["Urban Parks", "Calm Walks", "Shaded Areas"]),
        )
        await favorites.add(USER, LocationId("naschmarkt"))

        # Act
        response = await use_case.execute(BrowseLocationsRequest(user_id=USER))

        # Assert
        assert ids(response)[:2] == ["stadtpark", "naschmarkt"]
        assert response.locations[0].score == 12
        assert response.locations[1].score == 6
        assert response.locations[1].is_favorite

    @pytest.mark.asyncio
    async def test_favorites_category(self, catalog_env):
        # Arrange
        use_case = await catalog_env.get(BrowseLocationsUseCase)
        favorites = await catalog_env.get(FavoriteService)
        await favorites.add(USER, LocationId("kahlenberg"))

        # Act
        response = await use_case.execute(
            BrowseLocationsRequest(category="Favorites", user_id=USER)
        )

        # Assert
        assert ids(response) == ["kahlenberg"]

    @pytest.mark.asyncio
    async def test_accessibility_needs_filter_catalog(self, catalog_env):
        # Arrange
        use_case = await catalog_env.get(BrowseLocationsUseCase)
        profiles = await catalog_env.get(UserProfileService)
        await profiles.update_accessibility(
            USER, AccessibilityPreferences(wheelchair_needed=True)
        )

        # Act
        response = await use_case.execute(BrowseLocationsRequest(user_id=USER))

        # Assert
        assert sorted(ids(response)) == ["schonbrunn-palace", "stadtpark"]


class TestGetLocationUseCase:
    """Tests for GetLocationUseCase."""

    @pytest.mark.asyncio
    async def test_includes_trip_names_for_user(self, catalog_env):
        # Arrange
        use_case = await catalog_env.get(GetLocationUseCase)
        trips = await catalog_env.get(TripService)
        trip = await trips.create_trip(USER, "Spring", date(2025, 4, 1), date(2025, 4, 2))
        await trips.add_location_to_day(
            USER, trip.id, date(2025, 4, 2), LocationId("stadtpark")
        )

        # Act
        response = await use_case.execute(
            GetLocationRequest(location_id="stadtpark", user_id=USER)
        )

        # Assert
        assert response.location.name == "Stadtpark"
        assert response.trip_names == ["Spring"]

    @pytest.mark.asyncio
    async def test_unknown_location(self, catalog_env):
        use_case = await catalog_env.get(GetLocationUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetLocationRequest(location_id="prater-moon"))
