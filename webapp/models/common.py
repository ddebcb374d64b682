from typing import List

from pydantic import BaseModel


class Health(BaseModel):
    status: str
    timestamp: str
    uptime: float


class Welcome(BaseModel):
    message: str
    service: str
    environment: str
    version: str


class ServiceInfo(BaseModel):
    service: str
    description: str
    features: List[str]


__all__ = ["Health", "Welcome", "ServiceInfo"]
