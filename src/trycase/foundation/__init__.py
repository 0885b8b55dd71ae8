"""Foundation - configuration and error taxonomy for trycase."""

from __future__ import annotations

from .config import CaptureSettings, LoggingSettings, TrycaseSettings, clear_settings_cache, get_settings
from .errors import ErrorKind, NoSuchElementError, TryError, UnsupportedOperationError, classify_exception

__all__ = [
    # Errors
    "ErrorKind", "TryError", "NoSuchElementError", "UnsupportedOperationError", "classify_exception",
    # Config
    "TrycaseSettings", "LoggingSettings", "CaptureSettings", "get_settings", "clear_settings_cache",
]
