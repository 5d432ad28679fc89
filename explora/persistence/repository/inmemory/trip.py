"""In-memory trip repository."""

from typing import Optional

from explora.domain.model.trip import Trip
from explora.domain.repository.trip import TripRepository
from explora.domain.value import TripId, UserId


class InMemoryTripRepository(TripRepository):
    """In-memory implementation of TripRepository."""

    def __init__(self) -> None:
        self._trips: dict[TripId, Trip] = {}

    async def find_by_id(self, trip_id: TripId) -> Optional[Trip]:
        """Find a trip by ID."""
        return self._trips.get(trip_id)

    async def find_by_user(self, user_id: UserId) -> list[Trip]:
        """Find a user's trips."""
        trips = [t for t in self._trips.values() if t.user_id == user_id]
        return sorted(trips, key=lambda t: (t.created_at, t.id))

    async def save(self, trip: Trip) -> Trip:
        """Save a trip."""
        self._trips[trip.id] = trip
        return trip
