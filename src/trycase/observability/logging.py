"""Logging setup for trycase.

Modules log through stdlib loggers under the ``trycase`` namespace. Nothing is
installed on import; applications opt in with configure_logging(), which
attaches a single handler rendering either human-readable text or JSON Lines.

Quick Start:
    >>> from trycase.observability import configure_logging
    >>> configure_logging()  # doctest: +SKIP

    >>> import io
    >>> from trycase.foundation.config import LoggingSettings, TrycaseSettings
    >>> settings = TrycaseSettings(logging=LoggingSettings(level="DEBUG", format="json"))
    >>> handler = configure_logging(settings, stream=io.StringIO())  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, TextIO

import orjson

from trycase.foundation.config import get_settings

if TYPE_CHECKING:
    from trycase.foundation.config import TrycaseSettings

ROOT_LOGGER = "trycase"

# Marks the handler we own so reconfiguration replaces it instead of stacking
_HANDLER_ATTR = "_trycase_handler"


class TextFormatter(logging.Formatter):
    """Format: HH:MM:SS.mmm [level] logger: event"""

    def __init__(self, *, include_timestamps: bool = True) -> None:
        super().__init__()
        self.include_timestamps = include_timestamps

    def format(self, record: logging.LogRecord) -> str:
        parts = [_ts(record).strftime("%H:%M:%S.%f")[:-3]] if self.include_timestamps else []
        parts += [f"[{record.levelname.lower()}]", f"{record.name}:", record.getMessage()]
        line = " ".join(parts)
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class JsonFormatter(logging.Formatter):
    """JSON Lines output for log aggregation."""

    def __init__(self, *, include_timestamps: bool = True) -> None:
        super().__init__()
        self.include_timestamps = include_timestamps

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
        }
        if self.include_timestamps:
            payload = {"timestamp": _ts(record).isoformat(), **payload}
        if record.exc_info and record.exc_info[0] is not None:
            payload["exc_type"] = record.exc_info[0].__name__
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=str).decode()


def configure_logging(
    settings: TrycaseSettings | None = None,
    *,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Install (or replace) the trycase handler. Returns the installed handler."""
    settings = settings or get_settings()
    cfg = settings.logging
    formatter_cls = JsonFormatter if cfg.format == "json" else TextFormatter

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter_cls(include_timestamps=cfg.include_timestamps))
    setattr(handler, _HANDLER_ATTR, True)

    root = logging.getLogger(ROOT_LOGGER)
    for old in [h for h in root.handlers if getattr(h, _HANDLER_ATTR, False)]:
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(settings.effective_log_level)
    return handler


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger under the trycase namespace, e.g. get_logger("monads") -> trycase.monads."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def _ts(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=UTC)
