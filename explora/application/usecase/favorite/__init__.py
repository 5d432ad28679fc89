"""Favorite use cases."""

from .get_favorites import GetFavoritesRequest, GetFavoritesResponse, GetFavoritesUseCase
from .update_favorite import (
    UpdateFavoriteRequest,
    UpdateFavoriteResponse,
    UpdateFavoriteUseCase,
)

__all__ = [
    "GetFavoritesRequest",
    "GetFavoritesResponse",
    "GetFavoritesUseCase",
    "UpdateFavoriteRequest",
    "UpdateFavoriteResponse",
    "UpdateFavoriteUseCase",
]
