"""
Tests for the application factory.
"""

from fastapi.testclient import TestClient

from src.configs.settings import settings
from src.main import app, get_application


class TestApplication:
    def test_routes_are_mounted_under_api_prefix(self):
        paths = {route.path for route in get_application().routes}

        assert f"{settings.API_V1_STR}/liveness" in paths
        assert f"{settings.API_V1_STR}/readiness" in paths
        assert f"{settings.API_V1_STR}/web-extraction/extract" in paths

    def test_liveness(self):
        response = TestClient(app).get(f"{settings.API_V1_STR}/liveness")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_domain_errors_are_handled(self):
        # Both preconditions fail before any network call, whichever fires first
        response = TestClient(app).post(
            f"{settings.API_V1_STR}/web-extraction/extract", json={"url": "https://example.com", "question": ""}
        )

        assert response.status_code in (400, 500)
        assert "error_code" in response.json()
