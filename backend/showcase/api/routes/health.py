"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the active store is unreachable (readiness)
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from showcase.services.use_case_gateway import UseCaseGateway, get_use_case_gateway

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "showcase-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(
    gateway: UseCaseGateway = Depends(get_use_case_gateway),
):
    """Readiness probe — includes connectivity of the active store."""
    backend = gateway.select_store().backend.value
    if not await gateway.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "storage_unavailable",
                "backend": backend,
            },
        )
    return {"status": "ready", "checks": {"storage": "healthy", "backend": backend}}
