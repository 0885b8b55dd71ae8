"""Tests for pydantic-settings configuration."""

import pytest
from pydantic import ValidationError

from trycase.foundation.config import (
    CaptureSettings,
    LoggingSettings,
    TrycaseSettings,
    clear_settings_cache,
    get_settings,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: object) -> object:
    """Isolate from host TRYCASE_* variables and any .env in the cwd."""
    for name in ("TRYCASE_DEBUG", "TRYCASE_LOG_LEVEL", "TRYCASE_LOG_FORMAT",
                 "TRYCASE_LOG_INCLUDE_TIMESTAMPS", "TRYCASE_CAPTURE_LOG_CAPTURED",
                 "TRYCASE_CAPTURE_INCLUDE_TRACEBACK"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    yield
    clear_settings_cache()


def test_defaults() -> None:
    settings = TrycaseSettings()

    assert settings.debug is False
    assert settings.logging.level == "WARNING"
    assert settings.logging.format == "text"
    assert settings.logging.include_timestamps is True
    assert settings.capture.log_captured is True
    assert settings.capture.include_traceback is False
    assert settings.effective_log_level == "WARNING"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRYCASE_LOG_LEVEL", "debug")
    monkeypatch.setenv("TRYCASE_LOG_FORMAT", "json")
    monkeypatch.setenv("TRYCASE_CAPTURE_INCLUDE_TRACEBACK", "true")

    settings = TrycaseSettings()

    assert settings.logging.level == "DEBUG"
    assert settings.logging.format == "json"
    assert settings.capture.include_traceback is True


def test_debug_forces_debug_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRYCASE_DEBUG", "true")
    assert TrycaseSettings().effective_log_level == "DEBUG"


def test_invalid_values_rejected() -> None:
    with pytest.raises(ValidationError):
        LoggingSettings(level="LOUD")
    with pytest.raises(ValidationError):
        LoggingSettings(format="xml")


def test_explicit_nested_settings() -> None:
    settings = TrycaseSettings(
        logging=LoggingSettings(level="ERROR"),
        capture=CaptureSettings(log_captured=False),
    )
    assert settings.effective_log_level == "ERROR"
    assert settings.capture.log_captured is False


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("TRYCASE_LOG_LEVEL", "ERROR")
    assert get_settings().logging.level == "WARNING"

    clear_settings_cache()
    assert get_settings().logging.level == "ERROR"
