"""Location discovery routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from explora.application.usecase.location import (
    BrowseLocationsRequest,
    BrowseLocationsResponse,
    BrowseLocationsUseCase,
    GetLocationRequest,
    GetLocationResponse,
    GetLocationUseCase,
)
from explora.domain.service.search_service import ALL_CATEGORY
from explora.domain.value import Mood

router = APIRouter(prefix="/locations", tags=["locations"], route_class=DishkaRoute)


@router.get("", response_model=BrowseLocationsResponse)
async def browse_locations(
    use_case: FromDishka[BrowseLocationsUseCase],
    search: str = Query(default="", max_length=200),
    category: str = Query(default=ALL_CATEGORY),
    mood: Mood | None = Query(default=None),
    user_id: str | None = Query(default=None),
) -> BrowseLocationsResponse:
    """Browse the catalog.

    Args:
        use_case: Browse locations use case from DI
        search: Free text search
        category: "All", "Favorites" or a primary tag
        mood: Optional mood filter
        user_id: Personalizes ranking and favorites when given

    Returns:
        Ranked locations
    """
    return await use_case.execute(
        BrowseLocationsRequest(
            search=search, category=category, mood=mood, user_id=user_id
        )
    )


@router.get("/{location_id}", response_model=GetLocationResponse)
async def get_location(
    location_id: str,
    use_case: FromDishka[GetLocationUseCase],
    user_id: str | None = Query(default=None),
) -> GetLocationResponse:
    """Get one location, with the user's trips that include it."""
    return await use_case.execute(
        GetLocationRequest(location_id=location_id, user_id=user_id)
    )
