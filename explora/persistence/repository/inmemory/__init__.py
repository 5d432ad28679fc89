"""In-memory repository implementations."""

from .favorite import InMemoryFavoriteRepository
from .location import InMemoryLocationRepository
from .trip import InMemoryTripRepository
from .user_profile import InMemoryUserProfileRepository

__all__ = [
    "InMemoryFavoriteRepository",
    "InMemoryLocationRepository",
    "InMemoryTripRepository",
    "InMemoryUserProfileRepository",
]
