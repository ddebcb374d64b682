from fastapi import APIRouter

from webapp.core.config import get_settings
from webapp.models.common import Welcome

WELCOME_MESSAGE = "Welcome to Ethnus Mock Test 02 - Container Orchestration!"

router = APIRouter()


@router.get("/", response_model=Welcome, status_code=200)
async def welcome() -> Welcome:
    settings = get_settings()
    return Welcome(
        message=WELCOME_MESSAGE,
        service=settings.service_name,
        environment=settings.environment,
        version=settings.version,
    )


__all__ = ["router", "WELCOME_MESSAGE"]
