"""Type-agnostic rules: presence, equality and membership."""

from __future__ import annotations

from collections.abc import Sized
from typing import TYPE_CHECKING, Any

from ..constraints.constraint import Constraint
from ..validation.codes import ErrorCode
from .helpers import join_values, optional, require

if TYPE_CHECKING:
    from collections.abc import Iterable


def not_null(message: str | None = None) -> Constraint[Any]:
    return Constraint(
        hint=message or "Must not be null",
        code=ErrorCode.NOT_NULL,
        predicate=lambda value: value is not None,
    )


def required(message: str | None = None) -> Constraint[Any]:
    """Present and, for strings and collections, non-empty."""

    def _present(value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, str):
            return bool(value.strip())
        if isinstance(value, Sized):
            return len(value) > 0
        return True

    return Constraint(
        hint=message or "Is required",
        code=ErrorCode.REQUIRED,
        predicate=_present,
    )


def equals(expected: Any, message: str | None = None) -> Constraint[Any]:
    return Constraint(
        hint=message or f"Must be equal to {expected}",
        code=ErrorCode.INVALID_VALUE,
        predicate=optional(lambda value: value == expected),
    )


def one_of(values: Iterable[Any], message: str | None = None) -> Constraint[Any]:
    allowed = tuple(values)
    require(bool(allowed), "one_of requires at least one allowed value")
    return Constraint(
        hint=message or f"Must be one of: {join_values(allowed)}",
        code=ErrorCode.INVALID_VALUE,
        predicate=optional(lambda value: value in allowed),
    )


def not_one_of(values: Iterable[Any], message: str | None = None) -> Constraint[Any]:
    forbidden = tuple(values)
    require(bool(forbidden), "not_one_of requires at least one forbidden value")
    return Constraint(
        hint=message or f"Must not be one of: {join_values(forbidden)}",
        code=ErrorCode.INVALID_VALUE,
        predicate=optional(lambda value: value not in forbidden),
    )
