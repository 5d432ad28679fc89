"""Persistence infrastructure providers."""

from dishka import Scope, provide
import logfire

from explora.config import CacheSettings, Settings
from explora.domain.repository import (
    FavoriteRepository,
    LocationRepository,
    TripRepository,
    UserProfileRepository,
)
from explora.persistence.cache import TripLocationCache
from explora.persistence.catalog import load_catalog
from explora.persistence.repository.inmemory import (
    InMemoryFavoriteRepository,
    InMemoryLocationRepository,
    InMemoryTripRepository,
    InMemoryUserProfileRepository,
)
from explora.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    Repositories live for the lifetime of the process (APP scope) and the
    location repository starts from the configured catalog.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide
    def get_location_repository(self, settings: Settings) -> LocationRepository:
        """Provide location repository seeded with the catalog.

        Raises:
            ConfigurationError: If the configured catalog file is unusable
        """
        locations = load_catalog(settings.catalog.seed_path)
        logfire.info(
            "Location catalog ready",
            city_id=settings.catalog.city_id,
            count=len(locations),
        )
        return InMemoryLocationRepository(locations)

    @provide
    def get_favorite_repository(self) -> FavoriteRepository:
        """Provide favorite repository."""
        return InMemoryFavoriteRepository()

    @provide
    def get_user_profile_repository(self) -> UserProfileRepository:
        """Provide user profile repository."""
        return InMemoryUserProfileRepository()

    @provide
    def get_trip_repository(self) -> TripRepository:
        """Provide trip repository."""
        return InMemoryTripRepository()

    @provide
    def get_trip_location_cache(self, settings: CacheSettings) -> TripLocationCache:
        """Provide trip membership cache."""
        return TripLocationCache(ttl_seconds=settings.trip_location_ttl_seconds)
