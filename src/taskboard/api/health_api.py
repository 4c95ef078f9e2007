from fastapi import APIRouter, Depends
import logging

from taskboard.core.config import Settings
from taskboard.core.database import get_database_health
from taskboard.core.dependencies import get_settings_dependency
from taskboard.schemas.common import HealthCheckResponse

logger = logging.getLogger("HEALTH_API_LOGGER")

health_api_router = APIRouter(prefix="/health", tags=["health"])


@health_api_router.get("", response_model=HealthCheckResponse)
def health_status(settings: Settings = Depends(get_settings_dependency)):
    """
    Aggregate health check used by the Streamlit sidebar button.
    Reports "ok" when the database answers and "degraded" otherwise.
    """
    database_health = get_database_health()
    database_health["environment"] = settings.environment

    overall_status = "ok"
    if database_health.get("status") != "healthy":
        overall_status = "degraded"
        logger.warning(f"Health check degraded: {database_health.get('error')}")

    return HealthCheckResponse(status=overall_status, database=database_health)
