"""Liveness probe."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from explora.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    checked_at: datetime
    environment: str
    city_id: str
    git_sha: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report which city catalog and build this instance serves."""
    return HealthResponse(
        status="healthy",
        checked_at=datetime.now(timezone.utc),
        environment=settings.environment,
        city_id=settings.catalog.city_id,
        git_sha=settings.git_sha,
    )
