"""Repository implementations."""

from .inmemory import (
    InMemoryFavoriteRepository,
    InMemoryLocationRepository,
    InMemoryTripRepository,
    InMemoryUserProfileRepository,
)

__all__ = [
    "InMemoryFavoriteRepository",
    "InMemoryLocationRepository",
    "InMemoryTripRepository",
    "InMemoryUserProfileRepository",
]
