"""Try monad: the outcome of a computation that either succeeded or raised.

Implements a closed two-variant union over a success value or a captured
exception, with the combinators of Scala's ``scala.util.Try``:
- Construction: Try.apply / attempt / try_fn (the only place exceptions are caught)
- Accessors: get, get_or_else, or_else, to_optional
- Functor/Monad: map, flat_map, flatten
- Filtering: filter
- Recovery: recover, recover_with, failed
- Case analysis: transform

Functions passed to combinators are not guarded: if they raise, the exception
propagates to the caller. Wrap their bodies in Try.apply when they may fail.

Example:
    >>> Try.apply(lambda: int("42")).map(lambda i: f"{i}, Hello World!").get()
    '42, Hello World!'
    >>> Try.apply(lambda: int("x")).recover(lambda e: 84).get()
    84
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from functools import wraps
from typing import TYPE_CHECKING, Generic, ParamSpec, TypeVar, cast

from trycase.foundation.config import get_settings
from trycase.foundation.errors import ErrorKind, NoSuchElementError, UnsupportedOperationError, classify_exception
from trycase.observability.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator
    from types import TracebackType

T = TypeVar("T")  # Success type
U = TypeVar("U")  # Mapped success type
P = ParamSpec("P")

logger = get_logger("monads")

# Variant tags
_SUCCESS = True
_FAILURE = False


class Try(Generic[T]):
    """Discriminated union of Success(value) and Failure(cause).

    The variant set is closed: build instances with Try.apply, Success or
    Failure, never by subclassing. Instances are immutable and every
    combinator returns a Try (the receiver itself when nothing changes).

    Examples:
        >>> Success(42).map(lambda x: x * 2)
        Success(84)
        >>> Failure(ValueError("bad")).map(lambda x: x * 2)
        Failure(ValueError('bad'))
        >>> Success(42).filter(lambda x: x > 100).is_failure()
        True

    Pattern matching binds the variant flag first, so a Success that happens
    to hold an exception never matches a Failure pattern:

        >>> match Try.apply(lambda: 1 / 0):
        ...     case Try(True, value): print(f"got {value}")
        ...     case Try(False, ZeroDivisionError()): print("div by zero")
        div by zero
        >>> match Success(ValueError("kept")):
        ...     case Try(False, ValueError()): print("failed")
        ...     case Try(True, ValueError() as e): print(f"holds {e}")
        holds kept

    The ``cause`` keyword pattern works too: ``case Try(cause=KeyError())``.
    """

    __slots__ = ("_value", "_is_success", "_tb", "_context")
    __match_args__ = ("_is_success", "_value")

    _value: T | BaseException
    _is_success: bool
    _tb: TracebackType | None
    _context: BaseException | None

    def __init__(self, value: T | BaseException, is_success: bool) -> None:
        """Private constructor. Use Try.apply, Success or Failure instead."""
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_is_success", is_success)
        # Snapshot of the cause as captured; get() restores both on every raise
        cause = None if is_success else cast(BaseException, value)
        object.__setattr__(self, "_tb", cause.__traceback__ if cause is not None else None)
        object.__setattr__(self, "_context", cause.__context__ if cause is not None else None)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[Try[T]], tuple[T | BaseException, bool]]:
        """Rebuild through __init__ so copy and deepcopy bypass the immutability guard."""
        return (type(self), (self._value, self._is_success))

    # ─── Construction ────────────────────────────────────────────────────

    @classmethod
    def apply(cls, computation: Callable[[], T]) -> Try[T]:
        """Run computation now, capturing any raised Exception as a Failure.

        The exception object itself becomes the cause. KeyboardInterrupt,
        SystemExit and other non-Exception BaseExceptions are fatal and
        propagate.
        """
        try:
            return cls(computation(), _SUCCESS)
        except Exception as exc:
            _log_capture(exc)
            return cls(exc, _FAILURE)

    # ─── Type Checking ───────────────────────────────────────────────────

    def is_success(self) -> bool:
        """Check if Try is the Success variant."""
        return self._is_success

    def is_failure(self) -> bool:
        """Check if Try is the Failure variant."""
        return not self._is_success

    # ─── Value Extraction ────────────────────────────────────────────────

    def get(self) -> T:
        """Return the Success value, or raise the captured cause on Failure.

        The same cause object is raised every time, starting from the
        traceback it was captured with. Raising it inside an ``except`` block
        does not leave the handled exception behind as its ``__context__``.
        """
        if self._is_success:
            return cast(T, self._value)
        cause = cast(BaseException, self._value)
        try:
            raise cause.with_traceback(self._tb)
        finally:
            # raise links any exception being handled as __context__
            cause.__context__ = self._context

    def get_or_else(self, default: T) -> T:
        """Return the Success value, or default on Failure. Never raises."""
        return cast(T, self._value) if self._is_success else default

    def or_else(self, alternative: Try[T]) -> Try[T]:
        """Return self if Success, otherwise alternative."""
        return self if self._is_success else alternative

    def to_optional(self) -> T | None:
        """Return the Success value, or None on Failure.

        A Success wrapping None is indistinguishable from a Failure here; use
        is_success() when that matters.
        """
        return cast(T, self._value) if self._is_success else None

    @property
    def cause(self) -> BaseException | None:
        """Captured exception on Failure, None on Success."""
        return None if self._is_success else cast(BaseException, self._value)

    @property
    def kind(self) -> ErrorKind | None:
        """ErrorKind of the Failure cause, None on Success."""
        return None if self._is_success else classify_exception(cast(BaseException, self._value))

    # ─── Side Effects ────────────────────────────────────────────────────

    def for_each(self, action: Callable[[T], object]) -> None:
        """Call action with the Success value. Inert on Failure."""
        if self._is_success:
            action(cast(T, self._value))

    # ─── Functor / Monad Operations ──────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Try[U]:
        """Apply f to the Success value. Try[T] → (T → U) → Try[U]

        Exceptions raised by f propagate; they are not captured.
        """
        if self._is_success:
            return Try(f(cast(T, self._value)), _SUCCESS)
        return cast(Try[U], self)

    def flat_map(self, f: Callable[[T], Try[U]]) -> Try[U]:
        """Monadic bind. Try[T] → (T → Try[U]) → Try[U]

        The Try returned by f is passed through as is. Guard f's body with
        Try.apply if it can raise.

        Example:
            >>> Success("42").flat_map(lambda s: Try.apply(lambda: int(s)))
            Success(42)
        """
        if self._is_success:
            return _expect_try(f(cast(T, self._value)), "flat_map")
        return cast(Try[U], self)

    def flatten(self: Try[Try[T]]) -> Try[T]:
        """Flatten nested Try. Try[Try[T]] → Try[T]"""
        if self._is_success:
            return _expect_try(self._value, "flatten")
        return cast(Try[T], self)

    def filter(self, predicate: Callable[[T], bool]) -> Try[T]:
        """Keep a Success only if predicate holds.

        A rejected value becomes Failure(NoSuchElementError). A Failure is
        returned untouched and predicate is not called.
        """
        if not self._is_success:
            return self
        value = cast(T, self._value)
        return self if predicate(value) else Try(NoSuchElementError(value), _FAILURE)

    # ─── Recovery ────────────────────────────────────────────────────────

    def recover(self, handler: Callable[[BaseException], T]) -> Try[T]:
        """On Failure, wrap handler(cause) in a Success. On Success, pass through."""
        if self._is_success:
            return self
        return Try(handler(cast(BaseException, self._value)), _SUCCESS)

    def recover_with(self, handler: Callable[[BaseException], Try[T]]) -> Try[T]:
        """On Failure, return handler(cause). On Success, pass through."""
        if self._is_success:
            return self
        return _expect_try(handler(cast(BaseException, self._value)), "recover_with")

    def failed(self) -> Try[BaseException]:
        """Invert the variants.

        Failure(e) becomes Success(e); Success becomes
        Failure(UnsupportedOperationError) and its value is dropped.
        """
        if self._is_success:
            return Try(UnsupportedOperationError(), _FAILURE)
        return Try(self._value, _SUCCESS)

    # ─── Case Analysis ───────────────────────────────────────────────────

    def transform(
        self,
        on_success: Callable[[T], Try[U]],
        on_failure: Callable[[BaseException], Try[U]],
    ) -> Try[U]:
        """Invoke exactly one handler depending on the variant and return its Try.

        Example:
            >>> Try.apply(lambda: int("x")).transform(
            ...     lambda i: Success(str(i)),
            ...     lambda e: Success(type(e).__name__),
            ... )
            Success('ValueError')
        """
        if self._is_success:
            return _expect_try(on_success(cast(T, self._value)), "transform")
        return _expect_try(on_failure(cast(BaseException, self._value)), "transform")

    # ─── Dunder Methods ──────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """True for Success."""
        return self._is_success

    def __iter__(self) -> Iterator[T]:
        """Yield the value once for Success, nothing for Failure."""
        if self._is_success:
            yield cast(T, self._value)

    def __repr__(self) -> str:
        return f"{'Success' if self._is_success else 'Failure'}({self._value!r})"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        """Structural equality. Failures compare causes by exact type and args."""
        if not isinstance(other, Try):
            return NotImplemented
        if self._is_success != other._is_success:
            return False
        if self._is_success:
            return bool(self._value == other._value)
        return self._value is other._value or _cause_key(self._value) == _cause_key(other._value)

    def __hash__(self) -> int:
        if self._is_success:
            return hash((_SUCCESS, self._value))
        # Exception args may be unhashable
        return hash((_FAILURE, type(self._value)))


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Success(value: T) -> Try[T]:  # noqa: N802
    """Construct Success variant."""
    return Try(value, _SUCCESS)


def Failure(cause: BaseException) -> Try[T]:  # noqa: N802
    """Construct Failure variant. cause must be an exception instance."""
    if not isinstance(cause, BaseException):
        raise TypeError(f"Failure cause must be an exception, got {type(cause).__name__}")
    return Try(cause, _FAILURE)


def attempt(computation: Callable[[], T]) -> Try[T]:
    """Module-level alias for Try.apply."""
    return Try.apply(computation)


def try_fn(fn: Callable[P, T]) -> Callable[P, Try[T]]:
    """Decorator: calls to fn return a Try instead of raising.

    Example:
        >>> @try_fn
        ... def parse(s: str) -> int:
        ...     return int(s)
        >>> parse("42"), parse("x").is_failure()
        (Success(42), True)
    """

    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Try[T]:
        return Try.apply(lambda: fn(*args, **kwargs))

    return wrapper


# ═══════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═══════════════════════════════════════════════════════════════════════════════


def sequence(tries: Iterable[Try[T]]) -> Try[list[T]]:
    """Iterable[Try[T]] → Try[list[T]]. Returns the first Failure as is."""
    values: list[T] = []
    for t in tries:
        if not t._is_success:
            return cast(Try[list[T]], t)
        values.append(cast(T, t._value))
    return Try(values, _SUCCESS)


def traverse(items: Iterable[T], f: Callable[[T], Try[U]]) -> Try[list[U]]:
    """Map f over items and sequence the results. Stops calling f at the first Failure."""
    values: list[U] = []
    for item in items:
        t = _expect_try(f(item), "traverse")
        if not t._is_success:
            return cast(Try[list[U]], t)
        values.append(cast(U, t._value))
    return Try(values, _SUCCESS)


# ═══════════════════════════════════════════════════════════════════════════════
# Internals
# ═══════════════════════════════════════════════════════════════════════════════


def _expect_try(result: object, operation: str) -> Try[U]:
    if not isinstance(result, Try):
        raise TypeError(f"{operation}() function must return a Try, got {type(result).__name__}")
    return cast(Try[U], result)


def _cause_key(exc: object) -> tuple[type, tuple[object, ...]]:
    return type(exc), getattr(exc, "args", ())


def _log_capture(exc: Exception) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    capture = get_settings().capture
    if capture.log_captured:
        logger.debug(
            "Try.apply captured %s: %s",
            type(exc).__name__,
            exc,
            exc_info=exc if capture.include_traceback else None,
        )
