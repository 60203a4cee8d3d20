"""
Health check endpoints for the API gateway.
Reports the status of PostgreSQL and Redis for monitoring systems.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def liveness_check():
    """Liveness probe endpoint."""
    return {"status": "alive"}


@router.get("/health/detailed")
async def detailed_health_check(request: Request):
    """
    Detailed health check including all dependencies.
    A failing dependency marks the service as degraded.
    """
    health_status = {
        "service": "sessionvault",
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "dependencies": {}
    }

    database = getattr(request.app.state, "database", None)
    if database is not None and await database.check_connection():
        health_status["dependencies"]["postgres"] = {"status": "healthy"}
    else:
        health_status["dependencies"]["postgres"] = {"status": "unhealthy"}
        health_status["status"] = "degraded"

    redis_client = getattr(request.app.state, "redis", None)
    try:
        if redis_client is None:
            raise RuntimeError("Redis client not initialized")
        await redis_client.ping()
        health_status["dependencies"]["redis"] = {"status": "healthy"}
    except Exception as e:
        logger.warning(f"Redis health check failed: {e}")
        health_status["dependencies"]["redis"] = {"status": "unhealthy", "error": str(e)}
        health_status["status"] = "degraded"

    return JSONResponse(content=health_status, status_code=200)
