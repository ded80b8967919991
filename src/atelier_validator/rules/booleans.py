"""Boolean rules. ``None`` is neither true nor false, so it fails both."""

from __future__ import annotations

from ..constraints.constraint import Constraint
from ..validation.codes import ErrorCode


def is_true(message: str | None = None) -> Constraint[bool | None]:
    return Constraint(
        hint=message or "Must be true",
        code=ErrorCode.INVALID_VALUE,
        predicate=lambda value: value is True,
    )


def is_false(message: str | None = None) -> Constraint[bool | None]:
    return Constraint(
        hint=message or "Must be false",
        code=ErrorCode.INVALID_VALUE,
        predicate=lambda value: value is False,
    )
