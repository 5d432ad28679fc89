"""Update favorite use case."""

from typing import Literal

import logfire
from pydantic import BaseModel

from explora.domain.service import FavoriteService
from explora.domain.value import LocationId, UserId


class UpdateFavoriteRequest(BaseModel):
    user_id: str
    location_id: str
    action: Literal["add", "remove", "toggle"]


class UpdateFavoriteResponse(BaseModel):
    location_id: str
    is_favorite: bool


class UpdateFavoriteUseCase:
    """Use case for adding, removing or toggling a favorite."""

    def __init__(self, favorite_service: FavoriteService) -> None:
        self.favorite_service = favorite_service

    async def execute(self, request: UpdateFavoriteRequest) -> UpdateFavoriteResponse:
        """Execute favorite update.

        Raises:
            NotFoundError: If a location being favorited doesn't exist
        """
        user_id = UserId(request.user_id)
        location_id = LocationId(request.location_id)

        with logfire.span(
            "update_favorite.execute", user_id=user_id, action=request.action
        ):
            if request.action == "add":
                await self.favorite_service.add(user_id, location_id)
                is_favorite = True
            elif request.action == "remove":
                await self.favorite_service.remove(user_id, location_id)
                is_favorite = False
            else:
                is_favorite = await self.favorite_service.toggle(user_id, location_id)

            return UpdateFavoriteResponse(location_id=location_id, is_favorite=is_favorite)
