"""Rule units: Constraint (single value) and CrossFieldCheck (whole object)."""

from __future__ import annotations

from .constraint import (
    NULL_DISPLAY,
    OTHER_PLACEHOLDER,
    VALUE_PLACEHOLDER,
    Constraint,
    CrossFieldCheck,
    render_value,
)

__all__ = [
    "NULL_DISPLAY",
    "OTHER_PLACEHOLDER",
    "VALUE_PLACEHOLDER",
    "Constraint",
    "CrossFieldCheck",
    "render_value",
]
