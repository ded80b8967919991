"""Rules for sized containers: sequences, sets and mappings.

``None`` passes every rule except :func:`not_empty`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..constraints.constraint import Constraint
from ..validation.codes import ErrorCode
from .helpers import join_values, optional, require, require_non_negative

if TYPE_CHECKING:
    from collections.abc import Iterable


def not_empty(message: str | None = None) -> Constraint[Any]:
    return Constraint(
        hint=message or "Must not be empty",
        code=ErrorCode.NOT_EMPTY,
        predicate=lambda value: value is not None and len(value) > 0,
    )


def is_empty(message: str | None = None) -> Constraint[Any]:
    return Constraint(
        hint=message or "Must be empty",
        code=ErrorCode.INVALID_VALUE,
        predicate=optional(lambda value: len(value) == 0),
    )


# ── Size ─────────────────────────────────────────────────────────


def size(
    minimum: int | None = None,
    maximum: int | None = None,
    message: str | None = None,
) -> Constraint[Any]:
    require(minimum is not None or maximum is not None, "size requires min or max")
    require_non_negative(min_size=minimum, max_size=maximum)
    if minimum is not None and maximum is not None:
        require(minimum <= maximum, "min size must be <= max size")
        hint = f"Size must be between {minimum} and {maximum}"
    elif minimum is not None:
        hint = f"Must contain at least {minimum} items"
    else:
        hint = f"Must contain at most {maximum} items"

    def _within(value: Any) -> bool:
        count = len(value)
        if minimum is not None and count < minimum:
            return False
        return maximum is None or count <= maximum

    return Constraint(
        hint=message or hint,
        code=ErrorCode.OUT_OF_RANGE,
        predicate=optional(_within),
    )


def min_size(minimum: int, message: str | None = None) -> Constraint[Any]:
    return size(minimum=minimum, message=message)


def max_size(maximum: int, message: str | None = None) -> Constraint[Any]:
    return size(maximum=maximum, message=message)


def exact_size(expected: int, message: str | None = None) -> Constraint[Any]:
    require_non_negative(exact_size=expected)
    return Constraint(
        hint=message or f"Must contain exactly {expected} items",
        code=ErrorCode.OUT_OF_RANGE,
        predicate=optional(lambda value: len(value) == expected),
    )


# ── Membership ───────────────────────────────────────────────────


def contains(element: Any, message: str | None = None) -> Constraint[Any]:
    return Constraint(
        hint=message or f"Must contain {element}",
        code=ErrorCode.INVALID_VALUE,
        predicate=optional(lambda value: element in value),
    )


def does_not_contain(element: Any, message: str | None = None) -> Constraint[Any]:
    return Constraint(
        hint=message or f"Must not contain {element}",
        code=ErrorCode.INVALID_VALUE,
        predicate=optional(lambda value: element not in value),
    )


def contains_all(
    elements: Iterable[Any], message: str | None = None
) -> Constraint[Any]:
    wanted = tuple(elements)
    return Constraint(
        hint=message or f"Must contain all elements: {join_values(wanted)}",
        code=ErrorCode.INVALID_VALUE,
        predicate=optional(lambda value: all(e in value for e in wanted)),
    )


def contains_any(
    elements: Iterable[Any], message: str | None = None
) -> Constraint[Any]:
    wanted = tuple(elements)
    require(bool(wanted), "contains_any requires at least one element")
    return Constraint(
        hint=message or f"Must contain at least one of: {join_values(wanted)}",
        code=ErrorCode.INVALID_VALUE,
        predicate=optional(lambda value: any(e in value for e in wanted)),
    )


# ── Mapping keys ─────────────────────────────────────────────────


def contains_key(key: Any, message: str | None = None) -> Constraint[Any]:
    return Constraint(
        hint=message or f"Map must contain key {key}",
        code=ErrorCode.INVALID_VALUE,
        predicate=optional(lambda value: key in value),
    )


def contains_keys(keys: Iterable[Any], message: str | None = None) -> Constraint[Any]:
    wanted = tuple(keys)
    return Constraint(
        hint=message or f"Map must contain all keys: {join_values(wanted)}",
        code=ErrorCode.INVALID_VALUE,
        predicate=optional(lambda value: all(k in value for k in wanted)),
    )


def does_not_contain_key(key: Any, message: str | None = None) -> Constraint[Any]:
    return Constraint(
        hint=message or f"Map must not contain key {key}",
        code=ErrorCode.INVALID_VALUE,
        predicate=optional(lambda value: key not in value),
    )
