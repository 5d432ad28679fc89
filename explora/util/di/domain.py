"""Domain layer DI providers."""

from dishka import Scope, provide

from explora.config import (
    PerformanceSettings,
    PersonalizationSettings,
    QualitySettings,
    TaggingSettings,
    TripSettings,
)
from explora.domain.model.taxonomy import TagTaxonomy
from explora.domain.repository import (
    FavoriteRepository,
    LocationRepository,
    TripRepository,
    UserProfileRepository,
)
from explora.domain.service import (
    CategoryService,
    FavoriteService,
    LocationService,
    MoodService,
    PerformanceService,
    PersonalizationService,
    QualityService,
    SearchService,
    TagValidationService,
    TripService,
    UserProfileService,
)
from explora.persistence.cache import TripLocationCache
from explora.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Pure scoring services hold no state and are APP-scoped. Services over
    repositories are REQUEST-scoped to match the repository lifecycle.
    """

    scope = Scope.REQUEST

    # Stateless analyzers
    @provide(scope=Scope.APP)
    def get_tag_validation_service(
        self, taxonomy: TagTaxonomy, rules: TaggingSettings
    ) -> TagValidationService:
        """Provide tag validation service."""
        return TagValidationService(taxonomy=taxonomy, rules=rules)

    @provide(scope=Scope.APP)
    def get_category_service(
        self, taxonomy: TagTaxonomy, settings: QualitySettings
    ) -> CategoryService:
        """Provide cross-category analyzer."""
        return CategoryService(
            taxonomy=taxonomy, diversity_saturation=settings.diversity_saturation
        )

    @provide(scope=Scope.APP)
    def get_performance_service(self, settings: PerformanceSettings) -> PerformanceService:
        """Provide performance heuristics analyzer."""
        return PerformanceService(settings=settings)

    @provide(scope=Scope.APP)
    def get_quality_service(
        self,
        validation_service: TagValidationService,
        category_service: CategoryService,
        performance_service: PerformanceService,
        settings: QualitySettings,
    ) -> QualityService:
        """Provide quality scorer."""
        return QualityService(
            validation_service=validation_service,
            category_service=category_service,
            performance_service=performance_service,
            settings=settings,
        )

    @provide(scope=Scope.APP)
    def get_personalization_service(
        self, settings: PersonalizationSettings
    ) -> PersonalizationService:
        """Provide personalization scorer."""
        return PersonalizationService(settings=settings)

    @provide(scope=Scope.APP)
    def get_mood_service(self, taxonomy: TagTaxonomy) -> MoodService:
        """Provide mood matcher."""
        return MoodService(taxonomy=taxonomy)

    @provide(scope=Scope.APP)
    def get_search_service(self, taxonomy: TagTaxonomy) -> SearchService:
        """Provide search and filter service."""
        return SearchService(taxonomy=taxonomy)

    # Repository-backed services
    @provide
    def get_location_service(
        self, location_repository: LocationRepository, quality_service: QualityService
    ) -> LocationService:
        """Provide location catalog service."""
        return LocationService(
            location_repository=location_repository, quality_service=quality_service
        )

    @provide
    def get_favorite_service(
        self,
        favorite_repository: FavoriteRepository,
        location_repository: LocationRepository,
    ) -> FavoriteService:
        """Provide favorite service."""
        return FavoriteService(
            favorite_repository=favorite_repository,
            location_repository=location_repository,
        )

    @provide
    def get_user_profile_service(
        self, user_profile_repository: UserProfileRepository
    ) -> UserProfileService:
        """Provide user profile service."""
        return UserProfileService(user_profile_repository=user_profile_repository)

    @provide
    def get_trip_service(
        self,
        trip_repository: TripRepository,
        location_repository: LocationRepository,
        cache: TripLocationCache,
        settings: TripSettings,
    ) -> TripService:
        """Provide trip service."""
        return TripService(
            trip_repository=trip_repository,
            location_repository=location_repository,
            cache=cache,
            settings=settings,
        )
