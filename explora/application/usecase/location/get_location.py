"""Get location use case."""

from pydantic import BaseModel

from explora.domain.service import FavoriteService, LocationService, TripService
from explora.domain.value import LocationId, UserId

from .browse_locations import LocationItem


class GetLocationRequest(BaseModel):
    """Get location request."""

    location_id: str
    user_id: str | None = None


class GetLocationResponse(BaseModel):
    """Location details, with the user's trips that include it."""

    location: LocationItem
    trip_names: list[str]


class GetLocationUseCase:
    """Use case for the location detail view."""

    def __init__(
        self,
        location_service: LocationService,
        favorite_service: FavoriteService,
        trip_service: TripService,
    ) -> None:
        self.location_service = location_service
        self.favorite_service = favorite_service
        self.trip_service = trip_service

    async def execute(self, request: GetLocationRequest) -> GetLocationResponse:
        """Execute get location flow.

        Raises:
            NotFoundError: If the location doesn't exist
        """
        location = await self.location_service.get_by_id(LocationId(request.location_id))

        is_favorite = False
        trip_names: list[str] = []
        if request.user_id:
            user_id = UserId(request.user_id)
            is_favorite = location.id in await self.favorite_service.get_favorites(user_id)
            trip_names = await self.trip_service.trip_names_for_location(
                user_id, location.id
            )

        return GetLocationResponse(
            location=LocationItem.from_location(location, is_favorite=is_favorite),
            trip_names=trip_names,
        )
