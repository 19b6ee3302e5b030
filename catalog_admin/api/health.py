"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from fastapi import APIRouter

from catalog_admin.api.schemas import HealthResponse
from catalog_admin.infrastructure.config import settings
from catalog_admin.infrastructure.memory import get_database

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    return HealthResponse(
        status="healthy",
        service="catalog-admin",
        version=settings.api_version,
    )


@router.get("/ready")
async def readiness_check() -> dict[str, str]:
    """Check if service is ready to accept requests.

    The service is ready once the catalog store holds languages, which
    every localized screen needs.

    Returns:
        Readiness status.
    """
    if not get_database().languages:
        return {"status": "empty"}
    return {"status": "ready"}
