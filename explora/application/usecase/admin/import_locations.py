"""Import locations use case."""

from typing import Any

from pydantic import BaseModel, Field

from explora.domain.model.analysis import ImportResult
from explora.domain.service import LocationService


class ImportLocationsRequest(BaseModel):
    """Raw records, validated one by one during the import."""

    records: list[dict[str, Any]] = Field(min_length=1, max_length=1000)


class ImportLocationsUseCase:
    """Use case for bulk-loading locations into the catalog."""

    def __init__(self, location_service: LocationService) -> None:
        self.location_service = location_service

    async def execute(self, request: ImportLocationsRequest) -> ImportResult:
        """Execute import flow.

        Args:
            request: Location records

        Returns:
            Imported ids and failures with their reasons
        """
        return await self.location_service.import_records(request.records)
