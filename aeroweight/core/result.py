"""
Result - value-or-error sum type.

Component formulas return a Result instead of raising, so that an absent
parameter or undefined geometry propagates through composites as data and
callers can distinguish it from a programming error (which still raises).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from aeroweight.errors.taxonomy import EstimationError, EstimationFailed

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Either a value or an EstimationError, never both.

    Construct with Result.ok(value) or Result.fail(error).
    """
    value: Optional[T] = None
    error: Optional[EstimationError] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(value=value, error=None)

    @classmethod
    def fail(cls, error: EstimationError) -> "Result[T]":
        return cls(value=None, error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        """Return the value or raise EstimationFailed."""
        if self.error is not None:
            raise EstimationFailed(self.error)
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        if self.error is not None:
            return Result.fail(self.error)
        return Result.ok(fn(self.value))

    def and_then(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        if self.error is not None:
            return Result.fail(self.error)
        return fn(self.value)

    def within(self, parent: str) -> "Result[T]":
        """Nest the error path (if any) under a parent component name."""
        if self.error is None:
            return self
        return Result.fail(self.error.within(parent))
