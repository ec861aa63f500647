"""Common API endpoints router."""

import datetime

from fastapi import APIRouter, Depends

from api.dependencies import get_settings
from core.config import Settings
from core.models.api.responses import HealthResponse

router = APIRouter(tags=["common"])


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=settings.api_version,
        environment=settings.environment.value,
        timestamp=datetime.datetime.now(datetime.UTC).isoformat(),
        twitter_configured=settings.twitter_configured,
        openai_configured=settings.openai_configured,
    )
