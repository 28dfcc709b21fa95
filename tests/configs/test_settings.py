"""
Tests for application settings.
"""

import pytest
from pydantic import ValidationError

from src.configs.settings import PollingConfig, Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("EXTRACTION_API_KEY", raising=False)
        monkeypatch.delenv("EXTRACTION_POLL_INTERVAL_SECONDS", raising=False)
        monkeypatch.delenv("EXTRACTION_MAX_POLL_ATTEMPTS", raising=False)

        settings = Settings()

        assert settings.ENVIRONMENT_NAME == "test"
        assert settings.EXTRACTION_API_BASE_URL == "https://api.firecrawl.dev/v1"
        assert settings.EXTRACTION_API_KEY.get_secret_value() == ""
        assert settings.get_polling_config() == PollingConfig(poll_interval_seconds=1.0, max_poll_attempts=300)

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("EXTRACTION_POLL_INTERVAL_SECONDS", "0.25")
        monkeypatch.setenv("EXTRACTION_MAX_POLL_ATTEMPTS", "12")
        monkeypatch.setenv("EXTRACTION_API_KEY", "fc-env-key")

        settings = Settings()

        polling = settings.get_polling_config()
        assert polling.poll_interval_seconds == 0.25
        assert polling.max_poll_attempts == 12
        assert settings.EXTRACTION_API_KEY.get_secret_value() == "fc-env-key"
        assert "fc-env-key" not in repr(settings)

    def test_invalid_polling_config(self):
        with pytest.raises(ValidationError):
            Settings(EXTRACTION_MAX_POLL_ATTEMPTS=0).get_polling_config()
