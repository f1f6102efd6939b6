"""Health check endpoints."""

from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.v1.dependencies import get_profile_store
from core.config import settings
from domain.repositories.profile_repository import IProfileRecordStore

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    store: str | None = None
    backend: str | None = None


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check() -> HealthResponse:
    """
    Basic health check for load balancers.

    Returns service status without checking dependencies. Fast and lightweight.
    """
    return HealthResponse(
        status="healthy",
        version="1.0.0",
        timestamp=datetime.utcnow().isoformat(),
        environment=settings.app_env,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    store: IProfileRecordStore = Depends(get_profile_store),
) -> HealthResponse:
    """
    Detailed health check including profile store connectivity.

    Use for monitoring dashboards that need to verify all dependencies.
    """
    try:
        await store.ping()
        store_status = "healthy"
    except Exception as e:
        store_status = f"unhealthy: {str(e)}"

    overall_status = "healthy" if store_status == "healthy" else "degraded"

    return HealthResponse(
        status=overall_status,
        version="1.0.0",
        timestamp=datetime.utcnow().isoformat(),
        environment=settings.app_env,
        store=store_status,
        backend=settings.profile_store_backend,
    )
