"""Get favorites use case."""

from pydantic import BaseModel

from explora.application.usecase.location.browse_locations import LocationItem
from explora.domain.service import FavoriteService, LocationService
from explora.domain.value import UserId


class GetFavoritesRequest(BaseModel):
    user_id: str


class GetFavoritesResponse(BaseModel):
    locations: list[LocationItem]


class GetFavoritesUseCase:
    """Use case for listing a user's favorite locations."""

    def __init__(
        self, favorite_service: FavoriteService, location_service: LocationService
    ) -> None:
        self.favorite_service = favorite_service
        self.location_service = location_service

    async def execute(self, request: GetFavoritesRequest) -> GetFavoritesResponse:
        """Favorites in catalog order; ids no longer in the catalog are skipped."""
        favorite_ids = await self.favorite_service.get_favorites(UserId(request.user_id))
        locations = await self.location_service.get_all()
        return GetFavoritesResponse(
            locations=[
                LocationItem.from_location(location, is_favorite=True)
                for location in locations
                if location.id in favorite_ids
            ]
        )
