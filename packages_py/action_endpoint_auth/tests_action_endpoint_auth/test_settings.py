import logging

import pytest

from action_endpoint_auth.settings import Settings, configure_logging, get_settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ACTIONS_API_BASE_PATH", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        settings = get_settings()

        assert settings.ACTIONS_API_BASE_PATH == "/api/server/v1/actions"
        assert settings.LOG_LEVEL == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        assert get_settings().LOG_LEVEL == "WARNING"

    def test_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:

    def test_applies_level(self):
        package_logger = logging.getLogger("action_endpoint_auth")
        previous = package_logger.level
        try:
            configure_logging(Settings(LOG_LEVEL="warning"))
            assert package_logger.level == logging.WARNING
        finally:
            package_logger.setLevel(previous)

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid LOG_LEVEL"):
            configure_logging(Settings(LOG_LEVEL="LOUD"))
