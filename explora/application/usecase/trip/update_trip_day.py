"""Update trip day use case."""

from datetime import date
from typing import Literal

from pydantic import BaseModel

from explora.domain.model.trip import Trip
from explora.domain.service import TripService
from explora.domain.value import LocationId, TripId, UserId


class UpdateTripDayRequest(BaseModel):
    user_id: str
    trip_id: str
    day: date
    location_id: str
    action: Literal["add", "remove"]


class UpdateTripDayResponse(BaseModel):
    trip: Trip
    changed: bool
    warning: str | None = None


class UpdateTripDayUseCase:
    """Use case for adding or removing a stop on a trip day."""

    def __init__(self, trip_service: TripService) -> None:
        self.trip_service = trip_service

    async def execute(self, request: UpdateTripDayRequest) -> UpdateTripDayResponse:
        """Execute trip day update.

        Args:
            request: Trip, day, location and action

        Returns:
            Updated trip, plus a pace warning when the day gets busy

        Raises:
            NotFoundError: If the trip, day or location doesn't exist
            BusinessRuleViolationError: If the day is full
        """
        user_id = UserId(request.user_id)
        trip_id = TripId(request.trip_id)
        location_id = LocationId(request.location_id)

        if request.action == "add":
            change = await self.trip_service.add_location_to_day(
                user_id, trip_id, request.day, location_id
            )
        else:
            change = await self.trip_service.remove_location_from_day(
                user_id, trip_id, request.day, location_id
            )

        return UpdateTripDayResponse(
            trip=change.trip, changed=change.changed, warning=change.warning
        )
