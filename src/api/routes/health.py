"""Health check endpoint."""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from adapter.mongodb.connection import get_mongodb_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health():
    """Health check endpoint with MongoDB status."""
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {}
    }

    healthy = True
    try:
        mongo_client = get_mongodb_client()
        if mongo_client:
            mongo_client.admin.command('ping')
            health_status["services"]["mongodb"] = {
                "status": "healthy",
                "message": "Connection successful"
            }
        else:
            health_status["services"]["mongodb"] = {
                "status": "unhealthy",
                "message": "Connection failed or not configured"
            }
            healthy = False
    except PyMongoError as e:
        health_status["services"]["mongodb"] = {
            "status": "unhealthy",
            "message": f"Connection error: {str(e)[:200]}"
        }
        healthy = False

    if not healthy:
        health_status["status"] = "degraded"
        logger.warning("Health check degraded", extra={"services": health_status["services"]})

    return JSONResponse(
        content=health_status,
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
    )
