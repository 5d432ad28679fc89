"""Favorite repository interface."""

from abc import ABC, abstractmethod

from explora.domain.value import LocationId, UserId


class FavoriteRepository(ABC):
    """Repository for a user's favorite locations."""

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> set[LocationId]:
        """Ids of the locations a user has favorited.

        Args:
            user_id: The user's ID

        Returns:
            Set of location ids (empty if the user has none)
        """
        pass

    @abstractmethod
    async def add(self, user_id: UserId, location_id: LocationId) -> None:
        """Mark a location as favorite. Adding twice is a no-op."""
        pass

    @abstractmethod
    async def remove(self, user_id: UserId, location_id: LocationId) -> bool:
        """Unmark a favorite.

        Returns:
            True if the favorite existed
        """
        pass
