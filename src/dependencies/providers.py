"""Dependency injection providers for FastAPI."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from lib.logger import Logger
from src.configs.settings import Settings, settings
from src.interfaces.extraction_client import WebExtractionClient
from src.services.extraction_api_client import WebExtractionApiClient


def _is_test_environment() -> bool:
    """Check if we're running in test environment."""
    return settings.ENVIRONMENT_NAME.lower() == "test"


def get_settings() -> Settings:
    """Get application settings."""
    return settings


def get_logger() -> Logger:
    """Get logger instance."""
    return Logger.get_logger(__name__)


def create_extraction_client(settings_provider: Settings) -> WebExtractionApiClient:
    """Create web extraction API client from settings."""
    polling = settings_provider.get_polling_config()
    return WebExtractionApiClient(
        base_url=settings_provider.EXTRACTION_API_BASE_URL,
        poll_interval_seconds=polling.poll_interval_seconds,
        max_poll_attempts=polling.max_poll_attempts,
        timeout=settings_provider.EXTRACTION_REQUEST_TIMEOUT_SECONDS,
    )


def get_extraction_client() -> WebExtractionClient:
    """Get web extraction API client instance."""
    if _is_test_environment():
        # Return new instance for tests
        return create_extraction_client(settings)
    else:
        # Use cached instance for production
        return _get_cached_extraction_client()


@lru_cache()
def _get_cached_extraction_client() -> WebExtractionClient:
    """Get cached web extraction API client instance (production only)."""
    return create_extraction_client(settings)


SettingsDep = Annotated[Settings, Depends(get_settings)]
LoggerDep = Annotated[Logger, Depends(get_logger)]
WebExtractionClientDep = Annotated[WebExtractionClient, Depends(get_extraction_client)]
