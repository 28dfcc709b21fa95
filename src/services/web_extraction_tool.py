"""Host plugin entry point for web page extraction."""

from typing import Any, Dict, Mapping, Optional

from src.dependencies.providers import get_extraction_client
from src.exceptions.domain_exceptions import ConfigurationError
from src.interfaces.extraction_client import WebExtractionClient
from src.models.extraction_request import ExtractionCredentials, WebExtractionRequest
from lib.logger import Logger

logger = Logger.get_logger(__name__)

API_KEY_SETTING = "firecrawlAPIKey"
MISSING_API_KEY_MESSAGE = "Firecrawl API Key is required. Please configure it in the plugin settings."


class WebExtractionTool:
    """Adapts loosely typed plugin parameters to a ``WebExtractionClient``."""

    def __init__(self, client: WebExtractionClient, logger_instance: Optional[Logger] = None):
        self.client = client
        self.logger = logger_instance or logger

    def run(self, params: Mapping[str, Any], user_settings: Mapping[str, Any]) -> Dict[str, Any]:
        credentials = ExtractionCredentials(api_key=str(user_settings.get(API_KEY_SETTING) or ""))
        request = WebExtractionRequest(
            url=str(params.get("url") or ""),
            question=str(params.get("question") or ""),
        )

        self.logger.info("Running web extraction tool", page_url=request.url)
        try:
            result = self.client.extract(request, credentials)
        except ConfigurationError as e:
            # The key comes from the plugin user settings
            raise ConfigurationError(message=MISSING_API_KEY_MESSAGE, config_key=API_KEY_SETTING, cause=e) from e
        return result.model_dump(exclude_none=True)


def extract_info_from_web_page(
    params: Mapping[str, Any],
    user_settings: Mapping[str, Any],
    client: Optional[WebExtractionClient] = None,
) -> Dict[str, Any]:
    """
    Extract information from a web page for a host application.

    Args:
        params: ``{"url": ..., "question": ...}``
        user_settings: ``{"firecrawlAPIKey": ...}``
        client: Optional client; defaults to one built from settings

    Returns:
        Extraction result as a plain dictionary
    """
    if client is None:
        client = get_extraction_client()
    return WebExtractionTool(client).run(params, user_settings)
