"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from bunko.config import Settings
from bunko.domain.registry import ContentRegistry
from bunko.domain.value import utc_now

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    environment: str
    post_types: list[str]
    collections: list[str]


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings], registry: FromDishka[ContentRegistry]
) -> HealthResponse:
    """Report that the service is running and which taxonomy it serves."""
    return HealthResponse(
        status="healthy",
        timestamp=utc_now(),
        version="0.1.0",
        environment=settings.environment,
        post_types=[pt.name.root for pt in registry.post_types],
        collections=[c.name.root for c in registry.collections],
    )
