"""Try monad for capturing failures as values.

Example:
    >>> from trycase.monads import Try
    >>>
    >>> result = (
    ...     Try.apply(lambda: int("42"))
    ...     .filter(lambda i: i > 0)
    ...     .map(lambda i: i * 2)
    ... )
    >>> assert result.get() == 84
"""

from .result import (
    Failure,
    Success,
    Try,
    attempt,
    sequence,
    traverse,
    try_fn,
)

__all__ = [
    # Core type
    "Try",
    "Success",
    "Failure",
    # Construction helpers
    "attempt",
    "try_fn",
    # Collection operations
    "sequence",
    "traverse",
]
