"""Numeric and ordered-value rules.

Bounds work with any mutually comparable values (``int``, ``float``,
``Decimal``, ``Fraction``...). ``None`` passes; ``NaN`` fails every ordered
comparison.
"""

from __future__ import annotations

from typing import Any

from ..constraints.constraint import Constraint
from ..validation.codes import ErrorCode
from .helpers import optional, require, require_bounds


def _bound(
    hint: str, predicate: Any, code: ErrorCode = ErrorCode.OUT_OF_RANGE
) -> Constraint[Any]:
    return Constraint(hint=hint, code=code, predicate=optional(predicate))


def min_value(minimum: Any, message: str | None = None) -> Constraint[Any]:
    return _bound(message or f"Must be at least {minimum}", lambda v: v >= minimum)


def max_value(maximum: Any, message: str | None = None) -> Constraint[Any]:
    return _bound(message or f"Must be at most {maximum}", lambda v: v <= maximum)


def greater_than(bound: Any, message: str | None = None) -> Constraint[Any]:
    return _bound(message or f"Must be greater than {bound}", lambda v: v > bound)


def greater_than_or_equal(bound: Any, message: str | None = None) -> Constraint[Any]:
    return _bound(
        message or f"Must be greater than or equal to {bound}", lambda v: v >= bound
    )


def less_than(bound: Any, message: str | None = None) -> Constraint[Any]:
    return _bound(message or f"Must be less than {bound}", lambda v: v < bound)


def less_than_or_equal(bound: Any, message: str | None = None) -> Constraint[Any]:
    return _bound(
        message or f"Must be less than or equal to {bound}", lambda v: v <= bound
    )


def in_range(minimum: Any, maximum: Any, message: str | None = None) -> Constraint[Any]:
    """Inclusive range."""
    require_bounds(minimum, maximum)
    return _bound(
        message or f"Must be between {minimum} and {maximum} (inclusive)",
        lambda v: minimum <= v <= maximum,
    )


def between(minimum: Any, maximum: Any, message: str | None = None) -> Constraint[Any]:
    """Exclusive range."""
    require_bounds(minimum, maximum, strict=True)
    return _bound(
        message or f"Must be between {minimum} and {maximum} (exclusive)",
        lambda v: minimum < v < maximum,
    )


def positive(message: str | None = None) -> Constraint[Any]:
    return _bound(message or "Must be positive", lambda v: v > 0)


def negative(message: str | None = None) -> Constraint[Any]:
    return _bound(message or "Must be negative", lambda v: v < 0)


def is_zero(message: str | None = None) -> Constraint[Any]:
    return _bound(message or "Must be zero", lambda v: v == 0, ErrorCode.INVALID_VALUE)


def multiple_of(divisor: Any, message: str | None = None) -> Constraint[Any]:
    require(divisor != 0, "divisor must not be 0")
    return _bound(
        message or f"Must be a multiple of {divisor}",
        lambda v: v % divisor == 0,
        ErrorCode.INVALID_VALUE,
    )
