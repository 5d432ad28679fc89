"""Domain value objects for Explora."""

from explora.domain.value.identifiers import LocationId, TripId, UserId
from explora.domain.value.types import Coordinates, Mood

__all__ = [
    # Identifiers
    "LocationId",
    "TripId",
    "UserId",
    # Types
    "Coordinates",
    "Mood",
]
