"""Health & Readiness Probes — liveness, uptime and database readiness.

Invariants:
    - GET /health always returns 200 if the process is up (liveness + uptime)
    - GET /health/ready returns 503 if the database is unreachable
    - GET / describes the service and its resource endpoints
"""

import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from cynova.config import get_settings

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])

SERVICE_NAME = "API Cynova - Cosmétiques Maison"
SERVICE_VERSION = "1.0.0"

_STARTED_AT = time.monotonic()


def uptime_seconds() -> float:
    return round(time.monotonic() - _STARTED_AT, 3)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/")
async def root():
    """Service metadata."""
    return {
        "message": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "status": "online",
        "timestamp": _now_iso(),
        "endpoints": {
            "produits": "/api/products",
            "ingredients": "/api/ingredients",
            "blogs": "/api/blogs",
            "utilisateurs": "/api/users",
            "health": "/health",
        },
    }


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "timestamp": _now_iso(),
        "uptime": uptime_seconds(),
        "environment": get_settings().environment,
    }


@router.get("/health/ready")
async def readiness_check(request: Request):
    """Readiness probe — includes database connectivity."""
    manager = getattr(request.app.state, "db", None)
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
