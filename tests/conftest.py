"""
Pytest configuration and fixtures for the test suite.
"""

# Set environment variables BEFORE any imports to ensure they're available during module discovery
import os
os.environ["ENVIRONMENT_NAME"] = "test"

from typing import Any, Callable, Optional

import pytest
import requests
from unittest.mock import Mock, patch

from src.models.extraction_request import ExtractionCredentials, WebExtractionRequest
from src.services.extraction_api_client import WebExtractionApiClient

TEST_BASE_URL = "https://extract.test/v1"


@pytest.fixture
def extraction_request() -> WebExtractionRequest:
    """Sample page and question."""
    return WebExtractionRequest(url="https://example.com/pricing", question="What does the pro plan cost?")


@pytest.fixture
def credentials() -> ExtractionCredentials:
    """Sample API credentials."""
    return ExtractionCredentials(api_key="fc-test-key")


@pytest.fixture
def mock_sleep() -> Mock:
    """Suspension function that records calls instead of waiting."""
    return Mock()


@pytest.fixture
def client(mock_sleep) -> WebExtractionApiClient:
    """Client with injected sleep and the default attempt ceiling."""
    return WebExtractionApiClient(base_url=TEST_BASE_URL, poll_interval_seconds=0.0, sleep=mock_sleep)


@pytest.fixture
def response_factory() -> Callable[..., Mock]:
    """Build fake ``requests.Response`` objects."""

    def _make(
        status_code: int = 200,
        body: Any = None,
        reason: str = "OK",
        invalid_json: bool = False,
    ) -> Mock:
        response = Mock(spec=requests.Response)
        response.status_code = status_code
        response.ok = 200 <= status_code < 300
        response.reason = reason
        if invalid_json:
            response.json.side_effect = requests.JSONDecodeError("Expecting value", "<html>", 0)
        else:
            response.json.return_value = {} if body is None else body
        return response

    return _make


@pytest.fixture
def status_response(response_factory) -> Callable[..., Mock]:
    """Build a successful status-call response."""

    def _make(status: str, success: bool = False, data: Any = None, error: Optional[str] = None) -> Mock:
        body: dict[str, Any] = {"status": status, "success": success, "data": data}
        if error is not None:
            body["error"] = error
        return response_factory(body=body)

    return _make


@pytest.fixture
def mock_post():
    """Patch the create call."""
    with patch("src.services.extraction_api_client.requests.post") as mock:
        yield mock


@pytest.fixture
def mock_get():
    """Patch the status call."""
    with patch("src.services.extraction_api_client.requests.get") as mock:
        yield mock
