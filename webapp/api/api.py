from typing import List

from fastapi import APIRouter

from webapp.core.config import get_settings
from webapp.models.common import ServiceInfo

DESCRIPTION = "Mock Test 02 - Container Orchestration & Service Discovery"

# Order is part of the response contract
FEATURES: List[str] = [
    "ECS Fargate",
    "Application Load Balancer",
    "Service Discovery",
    "Auto Scaling",
    "CloudWatch Monitoring",
]


router = APIRouter(prefix="/api")


@router.get("/info", response_model=ServiceInfo, status_code=200)
async def get_service_info() -> ServiceInfo:
    """Describe the service and the platform features it is deployed with."""
    return ServiceInfo(
        service=get_settings().service_name,
        description=DESCRIPTION,
        features=list(FEATURES),
    )


__all__ = ["router", "get_service_info", "DESCRIPTION", "FEATURES"]
