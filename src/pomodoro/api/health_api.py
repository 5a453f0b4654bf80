from fastapi import APIRouter
import logging

from pomodoro.core.database import get_database_health
from pomodoro.schemas.common import HealthCheckResponse

logger = logging.getLogger("HEALTH_API_LOGGER")

health_api_router = APIRouter(prefix="/health", tags=["health"])


@health_api_router.get("", response_model=HealthCheckResponse)
async def health_status():
    """
    Report whether the database answers. Does not require authentication.
    """
    database = get_database_health()
    if database["status"] != "healthy":
        logger.warning(f"Health check degraded: {database.get('error')}")
    return HealthCheckResponse(status=database["status"], database=database)
