"""Repository interfaces for the Explora domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from explora.domain.repository.favorite import FavoriteRepository
from explora.domain.repository.location import LocationRepository
from explora.domain.repository.trip import TripRepository
from explora.domain.repository.user_profile import UserProfileRepository

__all__ = [
    "FavoriteRepository",
    "LocationRepository",
    "TripRepository",
    "UserProfileRepository",
]
