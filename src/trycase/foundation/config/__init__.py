"""Configuration management using pydantic-settings."""

from .settings import (
    CaptureSettings,
    LoggingSettings,
    TrycaseSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "CaptureSettings",
    "LoggingSettings",
    "TrycaseSettings",
    "clear_settings_cache",
    "get_settings",
]
