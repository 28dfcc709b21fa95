from typing import Any, Literal

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings

from lib.logger import Logger

logger = Logger.get_logger(__name__)


class PollingConfig(BaseModel):
    """Fixed-interval polling parameters for extraction jobs."""

    poll_interval_seconds: float = Field(1.0, ge=0, description="Seconds to wait before each status check")
    max_poll_attempts: int = Field(300, ge=1, description="Maximum number of status checks before timing out")


class Settings(BaseSettings):
    PROJECT_NAME: str = "web-extraction-client"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT_NAME: Literal["local", "test", "dev", "prod"] = "local"

    # FastAPI configuration
    allowed_hosts: list[str] = ["*"]

    # Extraction API configuration
    EXTRACTION_API_BASE_URL: str = "https://api.firecrawl.dev/v1"
    # Only used by the HTTP service when a request carries no key of its own
    EXTRACTION_API_KEY: SecretStr = SecretStr("")
    EXTRACTION_REQUEST_TIMEOUT_SECONDS: float = 30.0

    # Polling configuration (5 minutes at the default interval)
    EXTRACTION_POLL_INTERVAL_SECONDS: float = 1.0
    EXTRACTION_MAX_POLL_ATTEMPTS: int = 300

    # OpenTelemetry Configuration
    OTEL_EXPORTER_OTLP_ENDPOINT: str = ""
    OTEL_TRACING_ENABLED: bool = False

    @property
    def fastapi_kwargs(self) -> dict[str, Any]:
        """Get FastAPI initialization kwargs."""
        return {}

    def get_polling_config(self) -> PollingConfig:
        """Get polling configuration for extraction jobs."""
        return PollingConfig(
            poll_interval_seconds=self.EXTRACTION_POLL_INTERVAL_SECONDS,
            max_poll_attempts=self.EXTRACTION_MAX_POLL_ATTEMPTS,
        )


try:
    settings = Settings()
except SystemExit as e:
    logger.error(f"Failed to load settings: {str(e)}")
    raise
