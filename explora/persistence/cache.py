"""Trip membership cache."""

from datetime import datetime, timedelta, timezone
from typing import Callable

from pydantic import BaseModel

from explora.domain.value import LocationId, TripId, UserId

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TripLookupEntry(BaseModel):
    """Cached answer to "which of this user's trips contain the location"."""

    trip_ids: list[TripId]
    expires_at: datetime


class TripLocationCache:
    """In-memory cache of trip lookups keyed by (user, location).

    Entries are not shared between processes. Trip edits go through the
    trip service, which invalidates the affected entry, so the TTL only
    bounds staleness for edits made elsewhere.

    Attributes:
        _entries: Dict mapping (user_id, location_id) -> TripLookupEntry
    """

    def __init__(self, ttl_seconds: int = 300, clock: Clock = utc_now) -> None:
        """Initialize empty cache.

        Args:
            ttl_seconds: Lifetime of an entry
            clock: Source of the current time, replaceable in tests
        """
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self._ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock
        self._entries: dict[tuple[UserId, LocationId], TripLookupEntry] = {}

    def get(self, user_id: UserId, location_id: LocationId) -> list[TripId] | None:
        """Retrieve cached trip ids.

        Automatically deletes expired entries.
        """
        key = (user_id, location_id)
        entry = self._entries.get(key)
        if entry is None:
            return None

        if entry.expires_at <= self._clock():
            self._entries.pop(key, None)
            return None

        return list(entry.trip_ids)

    def set(self, user_id: UserId, location_id: LocationId, trip_ids: list[TripId]) -> None:
        """Store trip ids for a user and location."""
        self._entries[(user_id, location_id)] = TripLookupEntry(
            trip_ids=list(trip_ids), expires_at=self._clock() + self._ttl
        )

    def invalidate(self, user_id: UserId, location_id: LocationId | None = None) -> None:
        """Drop one entry, or every entry of the user when no location is given."""
        if location_id is not None:
            self._entries.pop((user_id, location_id), None)
            return
        for key in [key for key in self._entries if key[0] == user_id]:
            del self._entries[key]

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
