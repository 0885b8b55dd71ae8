"""trycase - capture the outcome of a computation as a value.

A Try is either Success(value) or Failure(cause). Try.apply runs a
computation and turns any raised exception into a Failure; combinators then
map, chain, filter and recover without further try/except blocks.

Quick Start:
    >>> from trycase import Try
    >>>
    >>> answer = Try.apply(lambda: int("42"))
    >>> answer
    Success(42)
    >>> answer.map(lambda i: f"{i}, Hello World!").get()
    '42, Hello World!'
    >>>
    >>> broken = Try.apply(lambda: int("forty-two"))
    >>> broken.is_failure()
    True
    >>> broken.recover(lambda e: 84).get()
    84

Discriminating on error kind:
    >>> from trycase import NoSuchElementError
    >>> try:
    ...     answer.filter(lambda i: i != 42).get()
    ... except NoSuchElementError as e:
    ...     print(type(e).__name__, e)
    NoSuchElementError Predicate does not hold for 42

Logging (opt-in, configured from TRYCASE_LOG_* environment variables):
    >>> from trycase import configure_logging
    >>> configure_logging()  # doctest: +SKIP
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core
from .monads import Failure, Success, Try, attempt, sequence, traverse, try_fn

# Errors
from .foundation.errors import ErrorKind, NoSuchElementError, TryError, UnsupportedOperationError, classify_exception

# Config
from .foundation.config import TrycaseSettings, clear_settings_cache, get_settings

# Observability
from .observability import configure_logging, get_logger

__all__ = [
    "__version__",
    # Core
    "Try", "Success", "Failure", "attempt", "try_fn", "sequence", "traverse",
    # Errors
    "ErrorKind", "TryError", "NoSuchElementError", "UnsupportedOperationError", "classify_exception",
    # Config
    "TrycaseSettings", "get_settings", "clear_settings_cache",
    # Observability
    "configure_logging", "get_logger",
]
