"""Unit tests for FavoriteService."""

import pytest

from explora.domain.error import NotFoundError
from explora.domain.repository import LocationRepository
from explora.domain.service import FavoriteService
from explora.domain.value import LocationId, UserId
from tests.conftest import make_location
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

USER = UserId("user-1")
LOCATION = LocationId("test-location")


class TestFavoriteService:
    """Tests for FavoriteService."""

    @pytest.mark.asyncio
    async def test_add_and_remove(self, unit_env):
        # Arrange
        service = await unit_env.get(FavoriteService)
        location_repo = await unit_env.get(LocationRepository)
        await location_repo.save(make_location())

        # Act
        await service.add(USER, LOCATION)
        favorites = await service.get_favorites(USER)
        removed = await service.remove(USER, LOCATION)

        # Assert
        assert favorites == {LOCATION}
        assert removed
        assert await service.get_favorites(USER) == set()

    @pytest.mark.asyncio
    async def test_add_unknown_location(self, unit_env):
        service = await unit_env.get(FavoriteService)

        with pytest.raises(NotFoundError):
            await service.add(USER, LocationId("nowhere"))

    @pytest.mark.asyncio
    async def test_remove_missing_favorite_is_noop(self, unit_env):
        service = await unit_env.get(FavoriteService)

        assert not await service.remove(USER, LOCATION)

    @pytest.mark.asyncio
    async def test_toggle_flips_state(self, unit_env):
        # Arrange
        service = await unit_env.get(FavoriteService)
        location_repo = await unit_env.get(LocationRepository)
        await location_repo.save(make_location())

        # Act & Assert
        assert await service.toggle(USER, LOCATION)
        assert await service.get_favorites(USER) == {LOCATION}
        assert not await service.toggle(USER, LOCATION)
        assert await service.get_favorites(USER) == set()

    @pytest.mark.asyncio
    async def test_favorites_are_per_user(self, unit_env):
        # Arrange
        service = await unit_env.get(FavoriteService)
        location_repo = await unit_env.get(LocationRepository)
        await location_repo.save(make_location())

        # Act
        await service.add(USER, LOCATION)

        # Assert
        assert await service.get_favorites(UserId("user-2")) == set()
