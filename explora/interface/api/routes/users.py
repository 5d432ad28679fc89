"""User routes: profile, favorites and trips."""

from datetime import date

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from explora.application.usecase.favorite import (
    GetFavoritesRequest,
    GetFavoritesResponse,
    GetFavoritesUseCase,
    UpdateFavoriteRequest,
    UpdateFavoriteResponse,
    UpdateFavoriteUseCase,
)
from explora.application.usecase.trip import (
    CreateTripRequest,
    CreateTripUseCase,
    GetLocationTripsRequest,
    GetLocationTripsResponse,
    GetLocationTripsUseCase,
    ListTripsRequest,
    ListTripsResponse,
    ListTripsUseCase,
    UpdateTripDayRequest,
    UpdateTripDayResponse,
    UpdateTripDayUseCase,
)
from explora.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UpdateAccessibilityRequest,
    UpdateAccessibilityUseCase,
    UpdateTravelStyleRequest,
    UpdateTravelStyleUseCase,
)
from explora.domain.model.trip import Trip
from explora.domain.model.user_profile import (
    AccessibilityPreferences,
    TravelStyle,
    UserProfile,
)

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class CreateTripAPIRequest(BaseModel):
    """API request for creating a trip."""

    name: str = Field(min_length=1, max_length=100)
    start_date: date
    end_date: date


# Profile
@router.get("/{user_id}/profile", response_model=UserProfile)
async def get_user_profile(
    user_id: str, use_case: FromDishka[GetUserProfileUseCase]
) -> UserProfile:
    """Get a user's profile (defaults if the user never saved one)."""
    return await use_case.execute(GetUserProfileRequest(user_id=user_id))


@router.put("/{user_id}/travel-style", response_model=UserProfile)
async def update_travel_style(
    user_id: str,
    travel_style: TravelStyle,
    use_case: FromDishka[UpdateTravelStyleUseCase],
) -> UserProfile:
    """Save travel preferences; 3 to 10 preferred tags are required."""
    return await use_case.execute(
        UpdateTravelStyleRequest(user_id=user_id, travel_style=travel_style)
    )


@router.put("/{user_id}/accessibility", response_model=UserProfile)
async def update_accessibility(
    user_id: str,
    accessibility: AccessibilityPreferences,
    use_case: FromDishka[UpdateAccessibilityUseCase],
) -> UserProfile:
    """Save accessibility needs used to filter the catalog."""
    return await use_case.execute(
        UpdateAccessibilityRequest(user_id=user_id, accessibility=accessibility)
    )


# Favorites
@router.get("/{user_id}/favorites", response_model=GetFavoritesResponse)
async def get_favorites(
    user_id: str, use_case: FromDishka[GetFavoritesUseCase]
) -> GetFavoritesResponse:
    """List a user's favorite locations."""
    return await use_case.execute(GetFavoritesRequest(user_id=user_id))


@router.put("/{user_id}/favorites/{location_id}", response_model=UpdateFavoriteResponse)
async def add_favorite(
    user_id: str, location_id: str, use_case: FromDishka[UpdateFavoriteUseCase]
) -> UpdateFavoriteResponse:
    """Favorite a location. Idempotent."""
    return await use_case.execute(
        UpdateFavoriteRequest(user_id=user_id, location_id=location_id, action="add")
    )


@router.delete(
    "/{user_id}/favorites/{location_id}", response_model=UpdateFavoriteResponse
)
async def remove_favorite(
    user_id: str, location_id: str, use_case: FromDishka[UpdateFavoriteUseCase]
) -> UpdateFavoriteResponse:
    """Unfavorite a location. Idempotent."""
    return await use_case.execute(
        UpdateFavoriteRequest(user_id=user_id, location_id=location_id, action="remove")
    )


@router.post(
    "/{user_id}/favorites/{location_id}/toggle", response_model=UpdateFavoriteResponse
)
async def toggle_favorite(
    user_id: str, location_id: str, use_case: FromDishka[UpdateFavoriteUseCase]
) -> UpdateFavoriteResponse:
    """Flip the favorite state of a location."""
    return await use_case.execute(
        UpdateFavoriteRequest(user_id=user_id, location_id=location_id, action="toggle")
    )


# Trips
@router.post("/{user_id}/trips", response_model=Trip, status_code=status.HTTP_201_CREATED)
async def create_trip(
    user_id: str,
    request: CreateTripAPIRequest,
    use_case: FromDishka[CreateTripUseCase],
) -> Trip:
    """Create a trip with one empty day per date."""
    return await use_case.execute(
        CreateTripRequest(
            user_id=user_id,
            name=request.name,
            start_date=request.start_date,
            end_date=request.end_date,
        )
    )


@router.get("/{user_id}/trips", response_model=ListTripsResponse)
async def list_trips(
    user_id: str, use_case: FromDishka[ListTripsUseCase]
) -> ListTripsResponse:
    """List a user's trips."""
    return await use_case.execute(ListTripsRequest(user_id=user_id))


@router.get(
    "/{user_id}/locations/{location_id}/trips", response_model=GetLocationTripsResponse
)
async def get_location_trips(
    user_id: str, location_id: str, use_case: FromDishka[GetLocationTripsUseCase]
) -> GetLocationTripsResponse:
    """Trips of the user that already include the location."""
    return await use_case.execute(
        GetLocationTripsRequest(user_id=user_id, location_id=location_id)
    )


@router.post(
    "/{user_id}/trips/{trip_id}/days/{day}/locations/{location_id}",
    response_model=UpdateTripDayResponse,
)
async def add_location_to_day(
    user_id: str,
    trip_id: str,
    day: date,
    location_id: str,
    use_case: FromDishka[UpdateTripDayUseCase],
) -> UpdateTripDayResponse:
    """Add a stop to a trip day; busy days come back with a pace warning."""
    return await use_case.execute(
        UpdateTripDayRequest(
            user_id=user_id,
            trip_id=trip_id,
            day=day,
            location_id=location_id,
            action="add",
        )
    )


@router.delete(
    "/{user_id}/trips/{trip_id}/days/{day}/locations/{location_id}",
    response_model=UpdateTripDayResponse,
)
async def remove_location_from_day(
    user_id: str,
    trip_id: str,
    day: date,
    location_id: str,
    use_case: FromDishka[UpdateTripDayUseCase],
) -> UpdateTripDayResponse:
    """Remove a stop from a trip day."""
    return await use_case.execute(
        UpdateTripDayRequest(
            user_id=user_id,
            trip_id=trip_id,
            day=day,
            location_id=location_id,
            action="remove",
        )
    )
