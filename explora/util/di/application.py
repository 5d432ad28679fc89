"""Application layer DI providers."""

from dishka import Scope, provide

from explora.application.usecase.admin import (
    CreateLocationUseCase,
    DeleteLocationUseCase,
    GetCatalogValidationUseCase,
    GetQualityReportUseCase,
    ImportLocationsUseCase,
    ListLocationsByQualityUseCase,
    UpdateLocationTagsUseCase,
    ValidateLocationUseCase,
    VerifyLocationUseCase,
)
from explora.application.usecase.favorite import (
    GetFavoritesUseCase,
    UpdateFavoriteUseCase,
)
from explora.application.usecase.location import (
    BrowseLocationsUseCase,
    GetLocationUseCase,
)
from explora.application.usecase.taxonomy import (
    GetMoodUseCase,
    GetTaxonomyUseCase,
    ListMoodsUseCase,
)
from explora.application.usecase.trip import (
    CreateTripUseCase,
    GetLocationTripsUseCase,
    ListTripsUseCase,
    UpdateTripDayUseCase,
)
from explora.application.usecase.user import (
    GetUserProfileUseCase,
    UpdateAccessibilityUseCase,
    UpdateTravelStyleUseCase,
)
from explora.domain.model.taxonomy import TagTaxonomy
from explora.domain.service import (
    FavoriteService,
    LocationService,
    MoodService,
    PersonalizationService,
    QualityService,
    SearchService,
    TagValidationService,
    TripService,
    UserProfileService,
)
from explora.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Taxonomy use cases
    @provide
    def get_get_taxonomy_use_case(
        self, taxonomy: TagTaxonomy, search_service: SearchService
    ) -> GetTaxonomyUseCase:
        """Provide get taxonomy use case."""
        return GetTaxonomyUseCase(taxonomy=taxonomy, search_service=search_service)

    @provide
    def get_list_moods_use_case(self, mood_service: MoodService) -> ListMoodsUseCase:
        """Provide list moods use case."""
        return ListMoodsUseCase(mood_service=mood_service)

    @provide
    def get_get_mood_use_case(self, mood_service: MoodService) -> GetMoodUseCase:
        """Provide get mood use case."""
        return GetMoodUseCase(mood_service=mood_service)

    # Location use cases
    @provide
    def get_browse_locations_use_case(
        self,
        location_service: LocationService,
        search_service: SearchService,
        mood_service: MoodService,
        personalization_service: PersonalizationService,
        favorite_service: FavoriteService,
        user_profile_service: UserProfileService,
    ) -> BrowseLocationsUseCase:
        """Provide browse locations use case."""
        return BrowseLocationsUseCase(
            location_service=location_service,
            search_service=search_service,
            mood_service=mood_service,
            personalization_service=personalization_service,
            favorite_service=favorite_service,
            user_profile_service=user_profile_service,
        )

    @provide
    def get_get_location_use_case(
        self,
        location_service: LocationService,
        favorite_service: FavoriteService,
        trip_service: TripService,
    ) -> GetLocationUseCase:
        """Provide get location use case."""
        return GetLocationUseCase(
            location_service=location_service,
            favorite_service=favorite_service,
            trip_service=trip_service,
        )

    # Admin use cases
    @provide
    def get_validate_location_use_case(
        self, quality_service: QualityService
    ) -> ValidateLocationUseCase:
        """Provide validate location use case."""
        return ValidateLocationUseCase(quality_service=quality_service)

    @provide
    def get_create_location_use_case(
        self, location_service: LocationService, quality_service: QualityService
    ) -> CreateLocationUseCase:
        """Provide create location use case."""
        return CreateLocationUseCase(
            location_service=location_service, quality_service=quality_service
        )

    @provide
    def get_import_locations_use_case(
        self, location_service: LocationService
    ) -> ImportLocationsUseCase:
        """Provide import locations use case."""
        return ImportLocationsUseCase(location_service=location_service)

    @provide
    def get_update_location_tags_use_case(
        self, location_service: LocationService
    ) -> UpdateLocationTagsUseCase:
        """Provide update location tags use case."""
        return UpdateLocationTagsUseCase(location_service=location_service)

    @provide
    def get_verify_location_use_case(
        self, location_service: LocationService
    ) -> VerifyLocationUseCase:
        """Provide verify location use case."""
        return VerifyLocationUseCase(location_service=location_service)

    @provide
    def get_delete_location_use_case(
        self, location_service: LocationService
    ) -> DeleteLocationUseCase:
        """Provide delete location use case."""
        return DeleteLocationUseCase(location_service=location_service)

    @provide
    def get_quality_report_use_case(
        self, location_service: LocationService, quality_service: QualityService
    ) -> GetQualityReportUseCase:
        """Provide quality report use case."""
        return GetQualityReportUseCase(
            location_service=location_service, quality_service=quality_service
        )

    @provide
    def get_list_locations_by_quality_use_case(
        self, location_service: LocationService, quality_service: QualityService
    ) -> ListLocationsByQualityUseCase:
        """Provide list locations by quality use case."""
        return ListLocationsByQualityUseCase(
            location_service=location_service, quality_service=quality_service
        )

    @provide
    def get_catalog_validation_use_case(
        self,
        location_service: LocationService,
        tag_validation_service: TagValidationService,
    ) -> GetCatalogValidationUseCase:
        """Provide catalog validation use case."""
        return GetCatalogValidationUseCase(
            location_service=location_service,
            tag_validation_service=tag_validation_service,
        )

    # Favorite use cases
    @provide
    def get_get_favorites_use_case(
        self, favorite_service: FavoriteService, location_service: LocationService
    ) -> GetFavoritesUseCase:
        """Provide get favorites use case."""
        return GetFavoritesUseCase(
            favorite_service=favorite_service, location_service=location_service
        )

    @provide
    def get_update_favorite_use_case(
        self, favorite_service: FavoriteService
    ) -> UpdateFavoriteUseCase:
        """Provide update favorite use case."""
        return UpdateFavoriteUseCase(favorite_service=favorite_service)

    # User use cases
    @provide
    def get_get_user_profile_use_case(
        self, user_profile_service: UserProfileService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_profile_service=user_profile_service)

    @provide
    def get_update_travel_style_use_case(
        self, user_profile_service: UserProfileService
    ) -> UpdateTravelStyleUseCase:
        """Provide update travel style use case."""
        return UpdateTravelStyleUseCase(user_profile_service=user_profile_service)

    @provide
    def get_update_accessibility_use_case(
        self, user_profile_service: UserProfileService
    ) -> UpdateAccessibilityUseCase:
        """Provide update accessibility use case."""
        return UpdateAccessibilityUseCase(user_profile_service=user_profile_service)

    # Trip use cases
    @provide
    def get_create_trip_use_case(self, trip_service: TripService) -> CreateTripUseCase:
        """Provide create trip use case."""
        return CreateTripUseCase(trip_service=trip_service)

    @provide
    def get_list_trips_use_case(self, trip_service: TripService) -> ListTripsUseCase:
        """Provide list trips use case."""
        return ListTripsUseCase(trip_service=trip_service)

    @provide
    def get_location_trips_use_case(
        self, trip_service: TripService
    ) -> GetLocationTripsUseCase:
        """Provide location trips use case."""
        return GetLocationTripsUseCase(trip_service=trip_service)

    @provide
    def get_update_trip_day_use_case(
        self, trip_service: TripService
    ) -> UpdateTripDayUseCase:
        """Provide update trip day use case."""
        return UpdateTripDayUseCase(trip_service=trip_service)
