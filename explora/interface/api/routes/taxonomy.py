"""Taxonomy routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from explora.application.usecase.taxonomy import (
    GetMoodRequest,
    GetMoodUseCase,
    GetTaxonomyRequest,
    GetTaxonomyResponse,
    GetTaxonomyUseCase,
    ListMoodsRequest,
    ListMoodsResponse,
    ListMoodsUseCase,
    MoodItem,
)
from explora.domain.value import Mood

router = APIRouter(prefix="/taxonomy", tags=["taxonomy"], route_class=DishkaRoute)


@router.get("", response_model=GetTaxonomyResponse)
async def get_taxonomy(
    use_case: FromDishka[GetTaxonomyUseCase],
) -> GetTaxonomyResponse:
    """Get the user-facing tag layers and browse filter categories."""
    return await use_case.execute(GetTaxonomyRequest())


@router.get("/moods", response_model=ListMoodsResponse)
async def list_moods(use_case: FromDishka[ListMoodsUseCase]) -> ListMoodsResponse:
    """List moods with the tags they map to."""
    return await use_case.execute(ListMoodsRequest())


@router.get("/moods/{mood}", response_model=MoodItem)
async def get_mood(mood: Mood, use_case: FromDishka[GetMoodUseCase]) -> MoodItem:
    """Get the tags a mood maps to.

    Unknown moods are rejected by path validation (422).
    """
    return await use_case.execute(GetMoodRequest(mood=mood))
