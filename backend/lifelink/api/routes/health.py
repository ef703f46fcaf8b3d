"""Health & Readiness Checks: liveness text and database readiness.

Invariants:
    - GET / always returns 200 plain text if the process is up (liveness)
    - GET /health/ready returns 503 if the database is unreachable (readiness)
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from lifelink.api.responses import PrettyJSONResponse
from lifelink.core.envelope import success
from lifelink.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
async def liveness():
    """Basic liveness check."""
    return "Lifelink API is running!"


@router.get("/health/ready")
async def readiness_check():
    """Readiness check: includes database connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return PrettyJSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"success": False, "message": "Database unavailable"},
        )
    return success({"database": "healthy"})
