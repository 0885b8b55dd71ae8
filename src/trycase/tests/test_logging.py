"""Tests for logging configuration and formatters."""

from __future__ import annotations

import io
import logging

import orjson
import pytest

from trycase import Try, configure_logging, get_logger
from trycase.foundation.config import CaptureSettings, LoggingSettings, TrycaseSettings, clear_settings_cache


@pytest.fixture(autouse=True)
def reset_trycase_logger() -> object:
    """Drop handlers and level set by configure_logging between tests."""
    root = logging.getLogger("trycase")
    saved_handlers, saved_level = list(root.handlers), root.level
    clear_settings_cache()
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    clear_settings_cache()


def _settings(level: str = "DEBUG", fmt: str = "text", *, timestamps: bool = False) -> TrycaseSettings:
    return TrycaseSettings(
        logging=LoggingSettings(level=level, format=fmt, include_timestamps=timestamps),
        capture=CaptureSettings(),
    )


def test_get_logger_namespaces() -> None:
    assert get_logger().name == "trycase"
    assert get_logger("monads").name == "trycase.monads"


def test_text_format() -> None:
    stream = io.StringIO()
    configure_logging(_settings(), stream=stream)

    get_logger("tests").info("hello %s", "world")

    assert stream.getvalue() == "[info] trycase.tests: hello world\n"


def test_text_format_with_timestamp() -> None:
    stream = io.StringIO()
    configure_logging(_settings(timestamps=True), stream=stream)

    get_logger("tests").warning("careful")

    stamp, rest = stream.getvalue().split(" ", 1)
    assert len(stamp) == len("12:34:56.789")
    assert rest == "[warning] trycase.tests: careful\n"


def test_json_format() -> None:
    stream = io.StringIO()
    configure_logging(_settings(fmt="json", timestamps=True), stream=stream)

    get_logger("tests").info("hello")

    entry = orjson.loads(stream.getvalue())
    assert entry["event"] == "hello"
    assert entry["level"] == "info"
    assert entry["logger"] == "trycase.tests"
    assert "timestamp" in entry
    assert "exc_type" not in entry


def test_json_format_with_exception() -> None:
    stream = io.StringIO()
    configure_logging(_settings(fmt="json"), stream=stream)
    log = get_logger("tests")

    try:
        raise ValueError("Number not valid")
    except ValueError:
        log.exception("parse failed")

    entry = orjson.loads(stream.getvalue())
    assert entry["event"] == "parse failed"
    assert entry["exc_type"] == "ValueError"
    assert "Number not valid" in entry["exc_info"]
    assert "timestamp" not in entry


def test_level_filters_records() -> None:
    stream = io.StringIO()
    configure_logging(_settings(level="ERROR"), stream=stream)

    get_logger("tests").warning("dropped")
    get_logger("tests").error("kept")

    assert stream.getvalue() == "[error] trycase.tests: kept\n"


def test_reconfigure_replaces_handler() -> None:
    first, second = io.StringIO(), io.StringIO()
    configure_logging(_settings(), stream=first)
    handler = configure_logging(_settings(), stream=second)

    owned = [h for h in logging.getLogger("trycase").handlers if getattr(h, "_trycase_handler", False)]
    assert owned == [handler]

    get_logger("tests").info("once")
    assert first.getvalue() == ""
    assert second.getvalue() == "[info] trycase.tests: once\n"


def test_configure_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRYCASE_LOG_LEVEL", "INFO")
    monkeypatch.setenv("TRYCASE_LOG_FORMAT", "json")
    clear_settings_cache()

    handler = configure_logging(stream=io.StringIO())

    assert isinstance(handler.formatter, logging.Formatter)
    assert type(handler.formatter).__name__ == "JsonFormatter"
    assert logging.getLogger("trycase").level == logging.INFO


def test_captured_exception_reaches_configured_handler() -> None:
    stream = io.StringIO()
    configure_logging(_settings(), stream=stream)

    Try.apply(lambda: int("forty-two"))

    assert stream.getvalue().startswith("[debug] trycase.monads: Try.apply captured ValueError:")
