"""Location use cases."""

from .browse_locations import (
    BrowseLocationsRequest,
    BrowseLocationsResponse,
    BrowseLocationsUseCase,
    LocationItem,
)
from .get_location import GetLocationRequest, GetLocationResponse, GetLocationUseCase

__all__ = [
    "BrowseLocationsRequest",
    "BrowseLocationsResponse",
    "BrowseLocationsUseCase",
    "GetLocationRequest",
    "GetLocationResponse",
    "GetLocationUseCase",
    "LocationItem",
]
