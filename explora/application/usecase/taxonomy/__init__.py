"""Taxonomy use cases."""

from .get_taxonomy import (
    CategoryItem,
    GetTaxonomyRequest,
    GetTaxonomyResponse,
    GetTaxonomyUseCase,
)
from .list_moods import (
    GetMoodRequest,
    GetMoodUseCase,
    ListMoodsRequest,
    ListMoodsResponse,
    ListMoodsUseCase,
    MoodItem,
)

__all__ = [
    "CategoryItem",
    "GetMoodRequest",
    "GetMoodUseCase",
    "GetTaxonomyRequest",
    "GetTaxonomyResponse",
    "GetTaxonomyUseCase",
    "ListMoodsRequest",
    "ListMoodsResponse",
    "ListMoodsUseCase",
    "MoodItem",
]
