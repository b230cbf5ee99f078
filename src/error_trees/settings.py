"""Environment-based configuration using pydantic-settings.

Example:
    >>> from error_trees.settings import get_settings
    >>> get_settings().logging.level
    'WARNING'

    # Or with environment variables:
    # ERROR_TREES_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Logging configuration for the error_trees logger."""

    model_config = SettingsConfigDict(
        env_prefix="ERROR_TREES_LOG_",
        extra="ignore",
    )

    level: LogLevel = Field(default="WARNING", description="Level of the error_trees logger")
    propagate: bool = Field(default=True, description="Forward records to the root logger")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class ErrorTreesSettings(BaseSettings):
    """Root settings, loaded from ERROR_TREES_* environment variables.

    Example environment variables:
        ERROR_TREES_LOG_LEVEL=DEBUG
        ERROR_TREES_LOG_PROPAGATE=false
    """

    model_config = SettingsConfigDict(
        env_prefix="ERROR_TREES_",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> ErrorTreesSettings:
    """Get the global settings instance (cached)."""
    return ErrorTreesSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() rereads the environment."""
    get_settings.cache_clear()
