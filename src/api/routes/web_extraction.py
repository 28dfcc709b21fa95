from typing import Annotated, Optional

from fastapi import APIRouter, Header

from src.dependencies.providers import LoggerDep, SettingsDep, WebExtractionClientDep
from src.models.extraction_request import ExtractionCredentials, WebExtractionRequest
from src.models.extraction_response import ExtractionResult

web_extraction_router = APIRouter(prefix="/web-extraction", tags=["Web Extraction"])

API_KEY_HEADER = "X-Extraction-Api-Key"


@web_extraction_router.post("/extract", response_model=ExtractionResult)
def extract_web_page(
    request: WebExtractionRequest,
    client: WebExtractionClientDep,
    app_settings: SettingsDep,
    logger_instance: LoggerDep,
    api_key: Annotated[Optional[str], Header(alias=API_KEY_HEADER)] = None,
) -> ExtractionResult:
    """
    Extract information from a web page and wait for the answer.

    Blocks until the remote job completes, fails, is cancelled or times out;
    declared without ``async`` so polling runs in the threadpool. Domain
    errors are turned into JSON error responses by the registered handlers.
    """
    credentials = ExtractionCredentials(api_key=api_key or app_settings.EXTRACTION_API_KEY.get_secret_value())
    logger_instance.info(f"Web extraction requested for {request.url}")
    return client.extract(request, credentials)
