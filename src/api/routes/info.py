import os
from typing import Dict, Any

from fastapi import APIRouter, status, Response

from lib.logger import Logger
from src.dependencies.providers import SettingsDep

# Create our own info router for health check endpoints
info_router = APIRouter()

# Re-export for type checking
__all__ = ["info_router"]

logger = Logger.get_logger(os.path.basename(__file__))


@info_router.get("/liveness", tags=["Healthcheck"], status_code=status.HTTP_200_OK)
async def liveness_check() -> Dict[str, str]:
    """Simple liveness check - returns OK if service is running."""
    return {"status": "ok"}


@info_router.get("/readiness", tags=["Healthcheck"], status_code=status.HTTP_200_OK)
async def readiness_check(response: Response, app_settings: SettingsDep) -> Dict[str, Any]:
    """Configuration check; the extraction API itself is not called."""
    polling = app_settings.get_polling_config()
    ready = bool(app_settings.EXTRACTION_API_BASE_URL)

    if not ready:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("Readiness check failed: extraction API base URL is not configured")

    return {
        "status": "ready" if ready else "not ready",
        "extraction_api_base_url": app_settings.EXTRACTION_API_BASE_URL,
        "default_api_key_configured": bool(app_settings.EXTRACTION_API_KEY.get_secret_value()),
        "poll_interval_seconds": polling.poll_interval_seconds,
        "max_poll_attempts": polling.max_poll_attempts,
    }
