from fastapi import APIRouter

from webapp.core.runtime import uptime, utc_timestamp
from webapp.models.common import Health

router = APIRouter()


@router.get("/health", response_model=Health, status_code=200)
async def health() -> Health:
    """Lightweight health check endpoint for container orchestration."""
    return Health(status="healthy", timestamp=utc_timestamp(), uptime=uptime())


__all__ = ["router"]
