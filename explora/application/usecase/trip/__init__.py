"""Trip use cases."""

from .manage_trips import (
    CreateTripRequest,
    CreateTripUseCase,
    GetLocationTripsRequest,
    GetLocationTripsResponse,
    GetLocationTripsUseCase,
    ListTripsRequest,
    ListTripsResponse,
    ListTripsUseCase,
)
from .update_trip_day import (
    UpdateTripDayRequest,
    UpdateTripDayResponse,
    UpdateTripDayUseCase,
)

__all__ = [
    "CreateTripRequest",
    "CreateTripUseCase",
    "GetLocationTripsRequest",
    "GetLocationTripsResponse",
    "GetLocationTripsUseCase",
    "ListTripsRequest",
    "ListTripsResponse",
    "ListTripsUseCase",
    "UpdateTripDayRequest",
    "UpdateTripDayResponse",
    "UpdateTripDayUseCase",
]
