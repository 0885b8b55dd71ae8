"""Error taxonomy for trycase.

- ErrorKind: computation, predicate-not-satisfied, inverted-success
- TryError: base for errors synthesized by combinators
- NoSuchElementError: filter predicate did not hold
- UnsupportedOperationError: failed() on a Success
"""

from .errors import (
    ErrorKind,
    NoSuchElementError,
    TryError,
    UnsupportedOperationError,
    classify_exception,
)

__all__ = [
    "ErrorKind", "TryError", "NoSuchElementError", "UnsupportedOperationError",
    "classify_exception",
]
