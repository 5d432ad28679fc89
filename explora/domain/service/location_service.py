"""Location catalog domain service."""

from datetime import datetime
from typing import Any

import logfire
import pydantic

from explora.domain.error import (
    BusinessRuleViolationError,
    LocationValidationError,
    NotFoundError,
)
from explora.domain.model.analysis import ImportFailure, ImportResult
from explora.domain.model.location import Location, LocationTags
from explora.domain.repository import LocationRepository
from explora.domain.value import LocationId

from .base import Service
from .quality_service import QualityService


class LocationService(Service):
    """Domain service for reading and curating the location catalog.

    Every write that touches tags goes through quality control first, so
    the catalog never holds a location with tagging errors that was added
    through this service.
    """

    def __init__(
        self,
        location_repository: LocationRepository,
        quality_service: QualityService,
    ) -> None:
        """Initialize location service.

        Args:
            location_repository: Location repository
            quality_service: Quality control used to gate writes
        """
        self.location_repository = location_repository
        self.quality_service = quality_service

    async def get_all(self) -> list[Location]:
        """All catalog locations, ordered by name."""
        return await self.location_repository.find_all()

    async def get_by_id(self, location_id: LocationId) -> Location:
        """Get a location.

        Raises:
            NotFoundError: If no location has this ID
        """
        location = await self.location_repository.find_by_id(location_id)
        if not location:
            raise NotFoundError("Location", location_id)
        return location

    async def add_location(self, location: Location) -> Location:
        """Add a location to the catalog.

        Args:
            location: Location to add

        Returns:
            Saved location with fresh timestamps

        Raises:
            BusinessRuleViolationError: If the ID is already taken
            LocationValidationError: If the tags fail validation
        """
        with logfire.span("add_location", location_id=location.id):
            if await self.location_repository.find_by_id(location.id):
                raise BusinessRuleViolationError(f"Location already exists: {location.id}")

            self._check_quality(location)

            now = datetime.now()
            saved = await self.location_repository.save(
                location.model_copy(update={"created_at": now, "updated_at": now})
            )
            logfire.info("Location added", location_id=saved.id, name=saved.name)
            return saved

    async def update_tags(self, location_id: LocationId, tags: LocationTags) -> Location:
        """Replace the tags of a location.

        Raises:
            NotFoundError: If the location doesn't exist
            LocationValidationError: If the new tags fail validation
        """
        with logfire.span("update_location_tags", location_id=location_id):
            location = await self.get_by_id(location_id)
            updated = location.model_copy(update={"tags": tags, "updated_at": datetime.now()})
            self._check_quality(updated)
            return await self.location_repository.save(updated)

    async def verify(self, location_id: LocationId, verified_by: str = "admin") -> Location:
        """Mark a location as verified.

        Raises:
            NotFoundError: If the location doesn't exist
        """
        location = await self.get_by_id(location_id)
        verified = await self.location_repository.save(
            location.model_copy(
                update={
                    "verified": True,
                    "verified_by": verified_by,
                    "updated_at": datetime.now(),
                }
            )
        )
        logfire.info("Location verified", location_id=location_id, verified_by=verified_by)
        return verified

    async def delete(self, location_id: LocationId) -> None:
        """Remove a location from the catalog.

        Raises:
            NotFoundError: If the location doesn't exist
        """
        if not await self.location_repository.delete(location_id):
            raise NotFoundError("Location", location_id)
        logfire.info("Location deleted", location_id=location_id)

    async def import_records(self, records: list[dict[str, Any]]) -> ImportResult:
        """Import raw location records one by one.

        A failing record doesn't stop the import; it is reported with the
        reason instead.

        Args:
            records: Location records as decoded from JSON

        Returns:
            Imported ids and per-record failures
        """
        imported: list[LocationId] = []
        failed: list[ImportFailure] = []

        with logfire.span("import_locations", count=len(records)):
            for record in records:
                name = str(record.get("name") or record.get("id") or "<unnamed>")
                try:
                    location = Location.model_validate(record)
                    saved = await self.add_location(location)
                except (
                    pydantic.ValidationError,
                    LocationValidationError,
                    BusinessRuleViolationError,
                ) as e:
                    failed.append(ImportFailure(name=name, error=str(e)))
                else:
                    imported.append(saved.id)

            logfire.info("Locations imported", imported=len(imported), failed=len(failed))

        return ImportResult(imported=imported, failed=failed)

    def _check_quality(self, location: Location) -> None:
        result = self.quality_service.validate_with_quality_control(location)
        if result.errors:
            logfire.warn(
                "Location rejected by quality control",
                location_id=location.id,
                errors=result.errors,
            )
            raise LocationValidationError(location.name, result.errors)
