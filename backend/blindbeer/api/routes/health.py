"""Health probes for the container platform.

Invariants:
    - GET /api/v1/health/ answers 200 while the process is alive
    - GET /api/v1/health/ready answers 503 until the database answers SELECT 1
"""

from fastapi import APIRouter, Response, status

from blindbeer.infrastructure import database

router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE = {"service": "blindbeer-api", "version": "1.0.0"}


@router.get("/")
async def liveness():
    return {"status": "healthy", **SERVICE}


@router.get("/ready")
async def readiness(response: Response):
    # resolved per call: init_db() swaps the manager at startup
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {"status": "not_ready", "checks": {"database": "unavailable"}}
    return {"status": "ready", "checks": {"database": "healthy"}}
