"""Trip planning domain service."""

from datetime import date, datetime, timedelta
from uuid import uuid4

import logfire

from explora.config import TripSettings
from explora.domain.error import BusinessRuleViolationError, NotFoundError, ValidationError
from explora.domain.model.trip import Trip, TripDay, TripDayChange
from explora.domain.repository import LocationRepository, TripRepository
from explora.domain.value import LocationId, TripId, UserId
from explora.persistence.cache import TripLocationCache

from .base import Service


class TripService(Service):
    """Domain service for trips and their day-by-day stops.

    Lookups of which trips contain a location are cached per user and
    location; every edit made here invalidates the affected entry.
    """

    def __init__(
        self,
        trip_repository: TripRepository,
        location_repository: LocationRepository,
        cache: TripLocationCache,
        settings: TripSettings,
    ) -> None:
        """Initialize trip service.

        Args:
            trip_repository: Trip repository
            location_repository: Location repository
            cache: Trip membership cache
            settings: Daily capacity and trip length limits
        """
        self.trip_repository = trip_repository
        self.location_repository = location_repository
        self.cache = cache
        self.settings = settings

    async def create_trip(
        self, user_id: UserId, name: str, start_date: date, end_date: date
    ) -> Trip:
        """Create a trip with one empty day per date, both ends included.

        Raises:
            ValidationError: If the date range is reversed or too long
        """
        if end_date < start_date:
            raise ValidationError("Trip end date must not be before its start date")

        length = (end_date - start_date).days + 1
        if length > self.settings.max_trip_days:
            raise ValidationError(
                f"Trips can span at most {self.settings.max_trip_days} days"
            )

        now = datetime.now()
        trip = Trip(
            id=TripId(f"trip_{uuid4().hex}"),
            user_id=user_id,
            name=name,
            days=[TripDay(day=start_date + timedelta(days=i)) for i in range(length)],
            created_at=now,
            updated_at=now,
        )
        saved = await self.trip_repository.save(trip)
        logfire.info("Trip created", trip_id=saved.id, user_id=user_id, days=length)
        return saved

    async def get_trips(self, user_id: UserId) -> list[Trip]:
        return await self.trip_repository.find_by_user(user_id)

    async def get_trip(self, user_id: UserId, trip_id: TripId) -> Trip:
        """Get a trip owned by the user.

        Raises:
            NotFoundError: If the trip doesn't exist or belongs to someone else
        """
        trip = await self.trip_repository.find_by_id(trip_id)
        if not trip or trip.user_id != user_id:
            raise NotFoundError("Trip", trip_id)
        return trip

    async def trips_containing_location(
        self, user_id: UserId, location_id: LocationId
    ) -> list[TripId]:
        """Ids of the user's trips that visit the location on any day."""
        cached = self.cache.get(user_id, location_id)
        if cached is not None:
            return cached

        trips = await self.trip_repository.find_by_user(user_id)
        trip_ids = [trip.id for trip in trips if trip.contains_location(location_id)]
        self.cache.set(user_id, location_id, trip_ids)
        return trip_ids

    async def trip_names_for_location(
        self, user_id: UserId, location_id: LocationId
    ) -> list[str]:
        """Names of the user's trips that visit the location."""
        trip_ids = set(await self.trips_containing_location(user_id, location_id))
        trips = await self.trip_repository.find_by_user(user_id)
        return [trip.name for trip in trips if trip.id in trip_ids]

    async def add_location_to_day(
        self, user_id: UserId, trip_id: TripId, day: date, location_id: LocationId
    ) -> TripDayChange:
        """Append a stop to a trip day.

        Args:
            user_id: Trip owner
            trip_id: Trip to edit
            day: Date of the day to edit
            location_id: Location to add

        Returns:
            Updated trip, whether the stop was added, and a pace warning
            once the day gets busy

        Raises:
            NotFoundError: If the trip, day or location doesn't exist
            BusinessRuleViolationError: If the day is already full
        """
        with logfire.span(
            "add_location_to_day",
            trip_id=trip_id,
            day=day.isoformat(),
            location_id=location_id,
        ):
            trip = await self.get_trip(user_id, trip_id)
            target = self._find_day(trip, day)

            if not await self.location_repository.find_by_id(location_id):
                raise NotFoundError("Location", location_id)

            if location_id in target.location_ids:
                return TripDayChange(trip=trip, changed=False)

            warning = self._check_capacity(len(target.location_ids))

            days = [
                d.model_copy(update={"location_ids": [*d.location_ids, location_id]})
                if d.day == day
                else d
                for d in trip.days
            ]
            saved = await self.trip_repository.save(
                trip.model_copy(update={"days": days, "updated_at": datetime.now()})
            )
            self.cache.invalidate(user_id, location_id)
            return TripDayChange(trip=saved, changed=True, warning=warning)

    async def remove_location_from_day(
        self, user_id: UserId, trip_id: TripId, day: date, location_id: LocationId
    ) -> TripDayChange:
        """Remove a stop from a trip day. Removing an absent stop is a no-op.

        Raises:
            NotFoundError: If the trip or day doesn't exist
        """
        trip = await self.get_trip(user_id, trip_id)
        if location_id not in self._find_day(trip, day).location_ids:
            return TripDayChange(trip=trip, changed=False)

        days = [
            d.model_copy(
                update={"location_ids": [i for i in d.location_ids if i != location_id]}
            )
            if d.day == day
            else d
            for d in trip.days
        ]
        saved = await self.trip_repository.save(
            trip.model_copy(update={"days": days, "updated_at": datetime.now()})
        )
        self.cache.invalidate(user_id, location_id)
        logfire.info(
            "Location removed from trip day",
            trip_id=trip_id,
            day=day.isoformat(),
            location_id=location_id,
        )
        return TripDayChange(trip=saved, changed=True)

    @staticmethod
    def _find_day(trip: Trip, day: date) -> TripDay:
        for trip_day in trip.days:
            if trip_day.day == day:
                return trip_day
        raise NotFoundError("Trip day", f"{trip.id}/{day.isoformat()}")

    def _check_capacity(self, current_count: int) -> str | None:
        s = self.settings
        if current_count >= s.max_locations_per_day:
            raise BusinessRuleViolationError(
                f"Maximum {s.max_locations_per_day} activities per day reached. "
                "Consider spreading activities across multiple days for a better experience."
            )
        if current_count >= s.warning_threshold:
            return (
                f"You have {current_count} activities planned. We recommend keeping it "
                f"under {s.recommended_locations_per_day} for an enjoyable pace."
            )
        return None
