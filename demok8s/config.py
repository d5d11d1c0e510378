"""Application configuration settings."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEFAULT_MESSAGE = "Hello from Spring Boot on Kubernetes"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """Configuration values loaded once from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        extra="ignore",
        frozen=True,
    )

    app_message: str = Field(
        default=DEFAULT_MESSAGE,
        description="Greeting returned by GET /api/hello (APP_MESSAGE)",
    )
    host: str = Field(
        default="0.0.0.0",
        description="Interface the HTTP server binds to",
        min_length=1,
    )
    port: int = Field(default=8080, description="TCP port", ge=1, le=65535)
    log_level: str = Field(default="INFO", description="Root logging level")

    @field_validator("app_message", mode="before")
    @classmethod
    def _default_when_empty(cls, value: object) -> object:
        # An empty APP_MESSAGE behaves as if it were unset.
        if value is None or value == "":
            return DEFAULT_MESSAGE
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @property
    def message_overridden(self) -> bool:
        return self.app_message != DEFAULT_MESSAGE


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


__all__ = [
    "DEFAULT_MESSAGE",
    "Settings",
    "configure_logging",
    "get_settings",
    "reset_settings_cache",
]
