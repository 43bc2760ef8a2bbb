"""Health & Readiness Probes.

Invariants:
    - GET /api/health/ answers 200 while the process is up
    - GET /api/health/ready answers 503 until the database accepts a query
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import warehouser.infrastructure.database as database

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/")
async def health_check():
    return {"status": "healthy"}


@router.get("/ready")
async def readiness_check():
    """Ready once the shared pool can run SELECT 1."""
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready"},
        )
    return {"status": "ready"}
