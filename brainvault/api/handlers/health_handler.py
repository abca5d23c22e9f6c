"""
Health Check Handler

Provides health check endpoints for monitoring and load balancers.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from brainvault.shared.db.session import Database
from brainvault.shared.schemas.common import HealthResponse, ReadinessResponse
from brainvault.api.dependencies import AppSettings, get_database


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: AppSettings):
    """
    Basic health check endpoint.

    Returns:
        HealthResponse with service status
    """
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME.lower(),
        version=settings.APP_VERSION,
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(database: Database = Depends(get_database)):
    """
    Readiness check for Kubernetes/load balancers.

    Pings the database; answers 503 while it is unreachable.
    """
    if await database.ping():
        return ReadinessResponse(status="ready", database=True)
    return JSONResponse(
        status_code=503,
        content=ReadinessResponse(status="not_ready", database=False).model_dump(),
    )


@router.get("/live")
async def liveness_check():
    """
    Liveness check for Kubernetes.

    Returns:
        Simple alive status
    """
    return {"status": "alive"}
