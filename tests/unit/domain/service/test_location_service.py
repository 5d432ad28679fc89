"""Unit tests for LocationService."""

from datetime import datetime

import pytest

from explora.domain.error import (
    BusinessRuleViolationError,
    LocationValidationError,
    NotFoundError,
)
from explora.domain.repository import LocationRepository
from explora.domain.service import LocationService
from explora.domain.value import LocationId
from tests.conftest import make_location, make_tags
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAddLocation:
    """Tests for add_location method."""

    @pytest.mark.asyncio
    async def test_add_valid_location(self, unit_env):
        """Valid location should be saved with fresh timestamps."""
        # Arrange
        service = await unit_env.get(LocationService)
        location_repo = await unit_env.get(LocationRepository)
        old = datetime(2020, 1, 1)
        location = make_location(created_at=old, updated_at=old)

        # Act
        saved = await service.add_location(location)

        # Assert
        assert saved.created_at > old
        assert await location_repo.find_by_id(LocationId("test-location")) is not None

    @pytest.mark.asyncio
    async def test_invalid_tags_are_rejected_with_every_error(self, unit_env):
        """Location failing validation should not be saved."""
        # Arrange
        service = await unit_env.get(LocationService)
        location_repo = await unit_env.get(LocationRepository)
        location = make_location(tags=make_tags(primary=["Art Museums"], secondary=[]))

        # Act & Assert
        with pytest.raises(LocationValidationError) as exc_info:
            await service.add_location(location)

        assert len(exc_info.value.errors) == 2
        assert exc_info.value.location_name == "Test Location"
        assert await location_repo.find_all() == []

    @pytest.mark.asyncio
    async def test_duplicate_id_is_rejected(self, unit_env):
        # Arrange
        service = await unit_env.get(LocationService)
        await service.add_location(make_location())

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="already exists"):
            await service.add_location(make_location(name="Another Name"))


class TestCuration:
    """Tests for update_tags, verify and delete."""

    @pytest.mark.asyncio
    async def test_update_tags(self, unit_env):
        # Arrange
        service = await unit_env.get(LocationService)
        await service.add_location(make_location())
        new_tags = make_tags(primary=["Street Art", "Urban Parks", "Historical Sites"])

        # Act
        updated = await service.update_tags(LocationId("test-location"), new_tags)

        # Assert
        assert updated.tags == new_tags
        stored = await service.get_by_id(LocationId("test-location"))
        assert stored.tags.primary == ["Street Art", "Urban Parks", "Historical Sites"]

    @pytest.mark.asyncio
    async def test_update_with_invalid_tags_keeps_old_tags(self, unit_env):
        # Arrange
        service = await unit_env.get(LocationService)
        original = await service.add_location(make_location())

        # Act & Assert
        with pytest.raises(LocationValidationError):
            await service.update_tags(
                LocationId("test-location"), make_tags(primary=["Moon Base"])
            )

        stored = await service.get_by_id(LocationId("test-location"))
        assert stored.tags == original.tags

    @pytest.mark.asyncio
    async def test_verify(self, unit_env):
        # Arrange
        service = await unit_env.get(LocationService)
        await service.add_location(make_location())

        # Act
        verified = await service.verify(LocationId("test-location"), verified_by="curator")

        # Assert
        assert verified.verified
        assert verified.verified_by == "curator"

    @pytest.mark.asyncio
    async def test_delete(self, unit_env):
        # Arrange
        service = await unit_env.get(LocationService)
        await service.add_location(make_location())

        # Act
        await service.delete(LocationId("test-location"))

        # Assert
        with pytest.raises(NotFoundError):
            await service.get_by_id(LocationId("test-location"))

    @pytest.mark.asyncio
    async def test_delete_unknown_location(self, unit_env):
        service = await unit_env.get(LocationService)

        with pytest.raises(NotFoundError, match="Location not found: nowhere"):
            await service.delete(LocationId("nowhere"))


class TestImportRecords:
    """Tests for import_records method."""

    @pytest.mark.asyncio
    async def test_failures_do_not_stop_the_import(self, unit_env):
        """Each record should succeed or fail on its own."""
        # Arrange
        service = await unit_env.get(LocationService)
        good = make_location("good", "Good").model_dump(mode="json")
        badly_tagged = make_location(
            "thin", "Thin", tags=make_tags(primary=["Art Museums"])
        ).model_dump(mode="json")
        malformed = {"id": "broken", "name": ""}
        duplicate = make_location("good", "Good Again").model_dump(mode="json")

        # Act
        result = await service.import_records([good, badly_tagged, malformed, duplicate])

        # Assert
        assert result.imported == ["good"]
        assert [f.name for f in result.failed] == ["Thin", "broken", "Good Again"]
        assert "Minimum 3 primary tags required" in result.failed[0].error
        assert "already exists" in result.failed[2].error
        assert [loc.id for loc in await service.get_all()] == ["good"]
