"""Trip repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from explora.domain.model.trip import Trip
from explora.domain.value import TripId, UserId


class TripRepository(ABC):
    """Repository for user trips."""

    @abstractmethod
    async def find_by_id(self, trip_id: TripId) -> Optional[Trip]:
        """Find a trip by ID.

        Args:
            trip_id: Trip identifier

        Returns:
            The trip if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[Trip]:
        """Find all trips owned by a user, oldest first.

        Args:
            user_id: The user's ID

        Returns:
            List of trips
        """
        pass

    @abstractmethod
    async def save(self, trip: Trip) -> Trip:
        """Save or update a trip.

        Args:
            trip: Trip to save

        Returns:
            Saved trip
        """
        pass
