"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from api.dependencies import get_fetcher
from api.models.responses import HealthResponse
from core.config import API_VERSION
from services.schedule import ScheduleFetcher

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(fetcher: ScheduleFetcher = Depends(get_fetcher)):
    """Health check endpoint for monitoring."""
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        cached_entries=len(fetcher.cache),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
