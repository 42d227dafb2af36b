"""Application configuration."""

import logging
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    log_level: str = "INFO"
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def effective_log_level(self) -> int:
        """Return the logging level, forcing DEBUG in debug mode."""
        if self.debug:
            return logging.DEBUG
        level = logging.getLevelName(self.log_level.upper())
        if isinstance(level, int):
            return level
        return logging.INFO
