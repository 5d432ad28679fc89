"""Trip entity."""

from datetime import date, datetime

from pydantic import Field

from explora.domain.model.common import DomainModel
from explora.domain.value import LocationId, TripId, UserId


class TripDay(DomainModel):
    """A single day of a trip with its ordered stops."""

    day: date
    location_ids: list[LocationId] = Field(default_factory=list)


class Trip(DomainModel):
    """A multi-day itinerary owned by a user."""

    id: TripId
    user_id: UserId
    name: str = Field(min_length=1, max_length=100)
    days: list[TripDay] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def contains_location(self, location_id: LocationId) -> bool:
        """Check whether any day of the trip includes the location."""
        return any(location_id in day.location_ids for day in self.days)


class TripDayChange(DomainModel):
    """Result of adding or removing a stop on a trip day."""

    trip: Trip
    changed: bool  # False when the day already was in the requested state
    warning: str | None = None
