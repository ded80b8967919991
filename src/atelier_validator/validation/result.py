"""ValidationResult: the Success/Failure outcome of a validation run."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .codes import ErrorCode

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


@dataclass(frozen=True)
class ValidationErrorDetail:
    """A single failed rule, reported against one field.

    ``actual_value`` is the display form of the offending value (``"null"``
    for ``None``); it is meant for humans and logs, not for computation.
    """

    field_name: str
    message: str
    code: ErrorCode
    actual_value: str

    @property
    def dedup_key(self) -> tuple[str, ErrorCode, str]:
        """Identity used when collapsing duplicate failures."""
        return (self.field_name, self.code, self.message)

    def to_dict(self) -> dict[str, str]:
        return {
            "field_name": self.field_name,
            "message": self.message,
            "code": self.code.value,
            "actual_value": self.actual_value,
        }

    def __str__(self) -> str:
        return f"{self.field_name}: {self.message}"


class ValidationResult:
    """Base of the ``Success | Failure`` sum type.

    Usage::

        result = validator.validate(user)
        if isinstance(result, Failure):
            for detail in result.errors_for("email"):
                ...
    """

    __slots__ = ()

    @property
    def is_success(self) -> bool:
        return isinstance(self, Success)

    @property
    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def __bool__(self) -> bool:
        return self.is_success

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls) -> Success:
        return SUCCESS

    @classmethod
    def failure(cls, errors: Iterable[ValidationErrorDetail]) -> Failure:
        return Failure(tuple(errors))

    @classmethod
    def from_errors(cls, errors: Iterable[ValidationErrorDetail]) -> ValidationResult:
        """Return ``Success`` for no errors, otherwise a ``Failure``."""
        collected = tuple(errors)
        if not collected:
            return SUCCESS
        return Failure(collected)

    # ── Exceptions ───────────────────────────────────────────────

    def raise_if_failure(self) -> None:
        """Raise :class:`ValidationFailedError` when this result is a failure."""
        if isinstance(self, Failure):
            from ..primitives.exceptions import ValidationFailedError

            raise ValidationFailedError(self)


@dataclass(frozen=True)
class Success(ValidationResult):
    """Every registered rule passed."""

    def to_dict(self) -> dict[str, Any]:
        return {"valid": True, "errors": []}


@dataclass(frozen=True)
class Failure(ValidationResult):
    """One or more rules failed; ``errors`` is never empty."""

    errors: tuple[ValidationErrorDetail, ...]

    def __post_init__(self) -> None:
        errors = tuple(self.errors)
        if not errors:
            msg = "Failure requires at least one error; use Success instead"
            raise ValueError(msg)
        object.__setattr__(self, "errors", errors)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @cached_property
    def errors_by_field(self) -> Mapping[str, tuple[ValidationErrorDetail, ...]]:
        """Errors grouped by field name, groups in first-appearance order."""
        grouped: dict[str, list[ValidationErrorDetail]] = {}
        for detail in self.errors:
            grouped.setdefault(detail.field_name, []).append(detail)
        return MappingProxyType({name: tuple(group) for name, group in grouped.items()})

    def errors_for(self, field_name: str) -> list[ValidationErrorDetail]:
        """Return the errors reported against *field_name* (possibly empty)."""
        return [detail for detail in self.errors if detail.field_name == field_name]

    def first_error_for(self, field_name: str) -> ValidationErrorDetail | None:
        for detail in self.errors:
            if detail.field_name == field_name:
                return detail
        return None

    def has_error_for(self, field_name: str) -> bool:
        return self.first_error_for(field_name) is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": False,
            "errors": [detail.to_dict() for detail in self.errors],
        }


SUCCESS = Success()
