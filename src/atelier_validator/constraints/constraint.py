"""Constraint and CrossFieldCheck: the unit rules the engine evaluates."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ..validation.codes import ErrorCode
from ..validation.result import ValidationErrorDetail

T = TypeVar("T")
R = TypeVar("R")

VALUE_PLACEHOLDER = "{value}"
OTHER_PLACEHOLDER = "{other}"
NULL_DISPLAY = "null"


def render_value(value: Any) -> str:
    """Display form of a field value.

    ``None`` renders as ``"null"`` and booleans as ``"true"``/``"false"``;
    anything else goes through ``str()``.
    """
    if value is None:
        return NULL_DISPLAY
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class Constraint(Generic[R]):
    """A predicate over one field value, with the code and message it reports.

    ``hint`` may contain the literal ``{value}`` placeholder, which is
    replaced by the failing value's display form. No other formatting is
    applied, so braces elsewhere in the hint are left untouched.
    """

    hint: str
    code: ErrorCode
    predicate: Callable[[R], bool]

    def evaluate(self, value: R, field_name: str) -> ValidationErrorDetail | None:
        """Return ``None`` when *value* satisfies the predicate, else the error.

        Exceptions raised by the predicate propagate to the caller.
        """
        if self.predicate(value):
            return None
        rendered = render_value(value)
        return ValidationErrorDetail(
            field_name=field_name,
            message=self.hint.replace(VALUE_PLACEHOLDER, rendered),
            code=self.code,
            actual_value=rendered,
        )


@dataclass(frozen=True)
class CrossFieldCheck(Generic[T, R]):
    """A comparison between a field value and another value of the same object.

    ``selector`` derives the comparison value from the whole target object;
    ``compare(value, selected)`` returns ``True`` when the pair is valid.
    The hint understands ``{value}`` and ``{other}``. Errors are reported
    against ``field_name`` when set, otherwise against the owning field.
    """

    selector: Callable[[T], R]
    compare: Callable[[R, R], bool]
    hint: str
    code: ErrorCode = ErrorCode.CROSS_FIELD_ERROR
    field_name: str | None = None

    def evaluate(
        self, obj: T, field_value: R, field_name: str
    ) -> ValidationErrorDetail | None:
        selected = self.selector(obj)
        if self.compare(field_value, selected):
            return None
        rendered = render_value(field_value)
        message = self.hint.replace(VALUE_PLACEHOLDER, rendered).replace(
            OTHER_PLACEHOLDER, render_value(selected)
        )
        return ValidationErrorDetail(
            field_name=self.field_name or field_name,
            message=message,
            code=self.code,
            actual_value=rendered,
        )
