"""Package configuration using Pydantic Settings."""

import logging
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Base path under which action collections are served; used for links.
    ACTIONS_API_BASE_PATH: str = "/api/server/v1/actions"

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(case_sensitive=True, env_file=None)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Apply the configured log level to the package logger."""
    settings = settings or get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid LOG_LEVEL: {settings.LOG_LEVEL}")
    logging.getLogger("action_endpoint_auth").setLevel(level)
