"""Health endpoints — is the credit API process up, and can it reach its store?

Invariants:
    - GET /api/health/ answers 200 with the service identity while the process runs
    - GET /api/health/ready answers 503 until the customers/credits database responds
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import credit_system.infrastructure.database as database
from credit_system.config import get_settings

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/")
async def liveness():
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.service_version,
    }


@router.get("/ready")
async def readiness():
    """Ready only once the database answers; db_manager is read per call."""
    manager = database.db_manager
    store = "healthy" if manager and await manager.health_check() else "unavailable"
    body = {
        "status": "ready" if store == "healthy" else "not_ready",
        "checks": {"database": store},
    }
    if store != "healthy":
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
    return body
