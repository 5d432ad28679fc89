"""Favorite locations domain service."""

import logfire

from explora.domain.error import NotFoundError
from explora.domain.repository import FavoriteRepository, LocationRepository
from explora.domain.value import LocationId, UserId

from .base import Service


class FavoriteService(Service):
    """Domain service for a user's favorite locations."""

    def __init__(
        self,
        favorite_repository: FavoriteRepository,
        location_repository: LocationRepository,
    ) -> None:
        self.favorite_repository = favorite_repository
        self.location_repository = location_repository

    async def get_favorites(self, user_id: UserId) -> set[LocationId]:
        return await self.favorite_repository.find_by_user(user_id)

    async def add(self, user_id: UserId, location_id: LocationId) -> None:
        """Favorite a location.

        Raises:
            NotFoundError: If the location doesn't exist
        """
        if not await self.location_repository.find_by_id(location_id):
            raise NotFoundError("Location", location_id)
        await self.favorite_repository.add(user_id, location_id)
        logfire.info("Favorite added", user_id=user_id, location_id=location_id)

    async def remove(self, user_id: UserId, location_id: LocationId) -> bool:
        """Unfavorite a location.

        Returns:
            True if it was a favorite
        """
        removed = await self.favorite_repository.remove(user_id, location_id)
        if removed:
            logfire.info("Favorite removed", user_id=user_id, location_id=location_id)
        return removed

    async def toggle(self, user_id: UserId, location_id: LocationId) -> bool:
        """Flip the favorite state of a location.

        Returns:
            True if the location is now a favorite
        """
        if location_id in await self.get_favorites(user_id):
            await self.remove(user_id, location_id)
            return False
        await self.add(user_id, location_id)
        return True
