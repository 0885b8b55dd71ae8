"""Error kinds synthesized by Try combinators.

Most Failure causes are whatever the wrapped computation raised. Two
combinators build their own causes instead, and callers discriminate on them:
- filter: NoSuchElementError when the predicate does not hold
- failed: UnsupportedOperationError when called on a Success
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Classification of a Failure's cause.

    StrEnum keeps these loggable and pattern-matchable as plain strings.
    """
    COMPUTATION = "COMPUTATION"
    PREDICATE_NOT_SATISFIED = "PREDICATE_NOT_SATISFIED"
    INVERTED_SUCCESS = "INVERTED_SUCCESS"


class TryError(Exception):
    """Base class for errors created by trycase itself."""

    kind: ErrorKind = ErrorKind.COMPUTATION


class NoSuchElementError(TryError, LookupError):
    """Raised from get() on a Try whose filter predicate did not hold.

    Subclasses LookupError so existing ``except LookupError`` handlers still
    catch it. The rejected value stays available as ``value``.

    Example:
        >>> from trycase import Success
        >>> try:
        ...     Success(42).filter(lambda i: i != 42).get()
        ... except NoSuchElementError as e:
        ...     print(e, "|", e.value)
        Predicate does not hold for 42 | 42
    """

    kind = ErrorKind.PREDICATE_NOT_SATISFIED

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Predicate does not hold for {value!r}")

    def __reduce__(self) -> tuple[type[NoSuchElementError], tuple[object]]:
        # args holds the message, not the constructor argument
        return (type(self), (self.value,))


class UnsupportedOperationError(TryError, TypeError):
    """Cause of the Failure returned by failed() on a Success."""

    kind = ErrorKind.INVERTED_SUCCESS

    def __init__(self, message: str = "Success.failed") -> None:
        super().__init__(message)


def classify_exception(exc: BaseException) -> ErrorKind:
    """Map a Failure cause to its ErrorKind. Foreign exceptions are COMPUTATION."""
    return exc.kind if isinstance(exc, TryError) else ErrorKind.COMPUTATION
