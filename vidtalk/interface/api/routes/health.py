"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from vidtalk.application.usecase.common import ApiModel
from vidtalk.config import Settings
from vidtalk.interface.api.schemas import Envelope, ok

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(ApiModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str


@router.get("/health", response_model=Envelope[HealthResponse])
async def health_check(settings: FromDishka[Settings]) -> Envelope[HealthResponse]:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return ok(
        HealthResponse(
            status="healthy",
            timestamp=datetime.now(),
            version="0.1.0",
            git_sha=settings.git_sha,
        )
    )
