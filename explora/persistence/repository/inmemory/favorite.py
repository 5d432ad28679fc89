"""In-memory favorite repository."""

from explora.domain.repository.favorite import FavoriteRepository
from explora.domain.value import LocationId, UserId


class InMemoryFavoriteRepository(FavoriteRepository):
    """In-memory implementation of FavoriteRepository."""

    def __init__(self) -> None:
        self._favorites: dict[UserId, set[LocationId]] = {}

    async def find_by_user(self, user_id: UserId) -> set[LocationId]:
        """Find a user's favorites."""
        return set(self._favorites.get(user_id, set()))

    async def add(self, user_id: UserId, location_id: LocationId) -> None:
        """Add a favorite."""
        self._favorites.setdefault(user_id, set()).add(location_id)

    async def remove(self, user_id: UserId, location_id: LocationId) -> bool:
        """Remove a favorite."""
        favorites = self._favorites.get(user_id)
        if not favorites or location_id not in favorites:
            return False
        favorites.discard(location_id)
        return True
