"""Health check endpoint for service monitoring."""

from fastapi import APIRouter
from pydantic import BaseModel

from backbench_admin import __version__
from backbench_admin.core.config import settings

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str
    store_backend: str


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the health status of the service and its configured data store.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        store_backend=settings.store_backend,
    )
