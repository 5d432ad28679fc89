"""Trip use cases."""

from datetime import date

import logfire
from pydantic import BaseModel, Field

from explora.domain.model.trip import Trip
from explora.domain.service import TripService
from explora.domain.value import LocationId, UserId


class CreateTripRequest(BaseModel):
    user_id: str
    name: str = Field(min_length=1, max_length=100)
    start_date: date
    end_date: date


class ListTripsRequest(BaseModel):
    user_id: str


class ListTripsResponse(BaseModel):
    trips: list[Trip]


class GetLocationTripsRequest(BaseModel):
    user_id: str
    location_id: str


class GetLocationTripsResponse(BaseModel):
    """The user's trips that already include a location."""

    location_id: str
    trip_ids: list[str]
    trip_names: list[str]


class CreateTripUseCase:
    """Use case for creating an empty multi-day trip."""

    def __init__(self, trip_service: TripService) -> None:
        self.trip_service = trip_service

    async def execute(self, request: CreateTripRequest) -> Trip:
        """Execute create trip flow.

        Raises:
            ValidationError: If the date range is invalid
        """
        with logfire.span("create_trip.execute", user_id=request.user_id):
            return await self.trip_service.create_trip(
                UserId(request.user_id),
                request.name,
                request.start_date,
                request.end_date,
            )


class ListTripsUseCase:
    """Use case for listing a user's trips."""

    def __init__(self, trip_service: TripService) -> None:
        self.trip_service = trip_service

    async def execute(self, request: ListTripsRequest) -> ListTripsResponse:
        trips = await self.trip_service.get_trips(UserId(request.user_id))
        return ListTripsResponse(trips=trips)


class GetLocationTripsUseCase:
    """Use case behind the "already in your trips" badge on location cards."""

    def __init__(self, trip_service: TripService) -> None:
        self.trip_service = trip_service

    async def execute(self, request: GetLocationTripsRequest) -> GetLocationTripsResponse:
        user_id = UserId(request.user_id)
        location_id = LocationId(request.location_id)
        trip_ids = await self.trip_service.trips_containing_location(user_id, location_id)
        trip_names = await self.trip_service.trip_names_for_location(user_id, location_id)
        return GetLocationTripsResponse(
            location_id=location_id, trip_ids=trip_ids, trip_names=trip_names
        )
