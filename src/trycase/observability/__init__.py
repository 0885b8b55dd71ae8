"""Observability for trycase: stdlib logging with text or JSON output."""

from .logging import JsonFormatter, TextFormatter, configure_logging, get_logger

__all__ = ["configure_logging", "get_logger", "JsonFormatter", "TextFormatter"]
