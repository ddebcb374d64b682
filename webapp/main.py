from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from webapp.api.system import router as system_router
from webapp.api.public import router as public_router
from webapp.api.api import router as api_router
from webapp.core.config import get_settings
from webapp.core.logging import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging()
    yield


def create_app() -> FastAPI:
    settings = get_settings()
    # Only the three info routes are served; no docs or schema endpoints
    application = FastAPI(
        title=settings.service_name,
        version=settings.version,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Routers
    application.include_router(system_router)
    application.include_router(public_router)
    application.include_router(api_router)

    # 404 handler: JSON body for every unknown path
    async def not_found_handler(request: Request, exc: StarletteHTTPException):  # type: ignore[override]
        return JSONResponse({"detail": exc.detail or "Not Found"}, status_code=404)

    # Register only for 404 status code
    application.add_exception_handler(404, not_found_handler)

    return application


app = create_app()

__all__ = ["app", "create_app"]
