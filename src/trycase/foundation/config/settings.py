"""Environment-based configuration using pydantic-settings.

Example:
    >>> from trycase.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'WARNING'
    >>> settings.capture.log_captured
    True

    # Or with environment variables:
    # TRYCASE_LOG_LEVEL=DEBUG
    # TRYCASE_CAPTURE_INCLUDE_TRACEBACK=true
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TRYCASE_LOG_",
        extra="ignore",
    )

    level: LogLevel = "WARNING"
    format: Literal["json", "text"] = "text"
    include_timestamps: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class CaptureSettings(BaseSettings):
    """How Try.apply reports the exceptions it captures."""

    model_config = SettingsConfigDict(
        env_prefix="TRYCASE_CAPTURE_",
        extra="ignore",
    )

    log_captured: bool = Field(default=True, description="Log each captured exception at DEBUG")
    include_traceback: bool = Field(default=False, description="Attach traceback to capture logs")


class TrycaseSettings(BaseSettings):
    """Root settings for trycase.

    Loads configuration from environment variables with TRYCASE_ prefix.
    Supports nested configuration and .env files.

    Example environment variables:
        TRYCASE_DEBUG=true
        TRYCASE_LOG_LEVEL=DEBUG
        TRYCASE_LOG_FORMAT=json
        TRYCASE_CAPTURE_LOG_CAPTURED=false
    """

    model_config = SettingsConfigDict(
        env_prefix="TRYCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    # Nested settings (loaded with TRYCASE_LOG_, TRYCASE_CAPTURE_)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    capture: CaptureSettings = Field(default_factory=CaptureSettings)

    @computed_field
    @property
    def effective_log_level(self) -> LogLevel:
        """DEBUG when debug mode is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> TrycaseSettings:
    """Get the global settings instance (cached)."""
    return TrycaseSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    The next get_settings() call reloads configuration from environment.
    """
    get_settings.cache_clear()
