"""Location curation use cases: retag, verify, delete."""

from pydantic import BaseModel

from explora.domain.model.location import Location, LocationTags
from explora.domain.service import LocationService
from explora.domain.value import LocationId


class UpdateLocationTagsRequest(BaseModel):
    location_id: str
    tags: LocationTags


class VerifyLocationRequest(BaseModel):
    location_id: str
    verified_by: str = "admin"


class DeleteLocationRequest(BaseModel):
    location_id: str


class UpdateLocationTagsUseCase:
    """Use case for replacing a location's tags."""

    def __init__(self, location_service: LocationService) -> None:
        self.location_service = location_service

    async def execute(self, request: UpdateLocationTagsRequest) -> Location:
        return await self.location_service.update_tags(
            LocationId(request.location_id), request.tags
        )


class VerifyLocationUseCase:
    """Use case for marking a location as verified by a curator."""

    def __init__(self, location_service: LocationService) -> None:
        self.location_service = location_service

    async def execute(self, request: VerifyLocationRequest) -> Location:
        return await self.location_service.verify(
            LocationId(request.location_id), verified_by=request.verified_by
        )


class DeleteLocationUseCase:
    """Use case for removing a location from the catalog."""

    def __init__(self, location_service: LocationService) -> None:
        self.location_service = location_service

    async def execute(self, request: DeleteLocationRequest) -> None:
        await self.location_service.delete(LocationId(request.location_id))
