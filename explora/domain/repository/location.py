"""Location repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from explora.domain.model.location import Location
from explora.domain.value import LocationId


class LocationRepository(ABC):
    """Repository interface for the location catalog."""

    @abstractmethod
    async def save(self, location: Location) -> Location:
        """Save or update a location.

        Args:
            location: Location to save

        Returns:
            Saved location
        """
        pass

    @abstractmethod
    async def find_by_id(self, location_id: LocationId) -> Optional[Location]:
        """Find location by ID.

        Args:
            location_id: Location identifier

        Returns:
            Location if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, location_ids: list[LocationId]) -> list[Location]:
        """Find multiple locations in a single query.

        Args:
            location_ids: Location identifiers

        Returns:
            Found locations in the requested order (missing ids are skipped)
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Location]:
        """Find all locations, ordered by name.

        Returns:
            List of locations
        """
        pass

    @abstractmethod
    async def delete(self, location_id: LocationId) -> bool:
        """Delete a location.

        Args:
            location_id: Location identifier

        Returns:
            True if a location was deleted
        """
        pass
