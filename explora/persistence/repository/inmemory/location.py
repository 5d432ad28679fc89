"""In-memory implementation of the location repository."""

from copy import deepcopy
from typing import Iterable, Optional

from explora.domain.model.location import Location
from explora.domain.repository.location import LocationRepository
from explora.domain.value import LocationId


class InMemoryLocationRepository(LocationRepository):
    """In-memory implementation of LocationRepository."""

    def __init__(self, locations: Iterable[Location] = ()) -> None:
        """Initialize repository, optionally with a seed catalog."""
        self._locations: dict[LocationId, Location] = {
            location.id: deepcopy(location) for location in locations
        }

    async def save(self, location: Location) -> Location:
        """Save or update a location."""
        self._locations[location.id] = deepcopy(location)
        return deepcopy(location)

    async def find_by_id(self, location_id: LocationId) -> Optional[Location]:
        """Find location by ID."""
        location = self._locations.get(location_id)
        return deepcopy(location) if location else None

    async def find_by_ids(self, location_ids: list[LocationId]) -> list[Location]:
        """Find multiple locations by ID."""
        return [
            deepcopy(self._locations[location_id])
            for location_id in location_ids
            if location_id in self._locations
        ]

    async def find_all(self) -> list[Location]:
        """Find all locations."""
        locations = sorted(
            self._locations.values(), key=lambda loc: (loc.name.casefold(), loc.id)
        )
        return [deepcopy(location) for location in locations]

    async def delete(self, location_id: LocationId) -> bool:
        """Delete a location."""
        return self._locations.pop(location_id, None) is not None
