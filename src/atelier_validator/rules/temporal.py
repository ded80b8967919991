"""Date, datetime and duration rules.

Values are :class:`datetime.date`, :class:`datetime.datetime` or
:class:`datetime.timedelta`; the ``iso_*`` rules check ISO-8601 strings.
Rules that depend on the current moment accept an optional ``clock``
returning "now" so they can be pinned in tests. Without one, aware values
are compared against UTC now and naive values against local now.

``None`` passes every rule.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any

from ..constraints.constraint import Constraint
from ..validation.codes import ErrorCode
from .helpers import optional, require, require_bounds

if TYPE_CHECKING:
    from collections.abc import Callable

    Clock = Callable[[], datetime]

ISO_DATE_REGEX = re.compile(r"\d{4}-\d{2}-\d{2}")
ISO_DATETIME_REGEX = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d{1,9})?")
ISO_INSTANT_REGEX = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d{1,9})?(?:Z|[+-]\d{2}:\d{2})"
)
_FRACTION = re.compile(r"\.(\d+)")


# ── ISO-8601 parsing ─────────────────────────────────────────────


def parse_iso_date(text: str) -> date | None:
    if ISO_DATE_REGEX.fullmatch(text) is None:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def _normalise_iso(text: str) -> str:
    # fromisoformat takes at most microseconds and, before 3.11, no "Z"
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return text


def parse_iso_datetime(text: str) -> datetime | None:
    """Local datetime without an offset, e.g. ``2024-05-01T10:30:00``."""
    if ISO_DATETIME_REGEX.fullmatch(text) is None:
        return None
    try:
        return datetime.fromisoformat(_normalise_iso(text))
    except ValueError:
        return None


def parse_iso_instant(text: str) -> datetime | None:
    """Datetime with ``Z`` or a ``±HH:MM`` offset; returned timezone-aware."""
    if ISO_INSTANT_REGEX.fullmatch(text) is None:
        return None
    try:
        return datetime.fromisoformat(_normalise_iso(text))
    except ValueError:
        return None


def iso_date(message: str | None = None) -> Constraint[str | None]:
    return Constraint(
        hint=message or "Must be a valid ISO date (YYYY-MM-DD)",
        code=ErrorCode.INVALID_FORMAT,
        predicate=optional(lambda value: parse_iso_date(value) is not None),
    )


def iso_datetime(message: str | None = None) -> Constraint[str | None]:
    return Constraint(
        hint=message or "Must be a valid ISO datetime (YYYY-MM-DDTHH:MM:SS)",
        code=ErrorCode.INVALID_FORMAT,
        predicate=optional(lambda value: parse_iso_datetime(value) is not None),
    )


def iso_instant(message: str | None = None) -> Constraint[str | None]:
    return Constraint(
        hint=message or "Must be a valid ISO instant (YYYY-MM-DDTHH:MM:SSZ)",
        code=ErrorCode.INVALID_FORMAT,
        predicate=optional(lambda value: parse_iso_instant(value) is not None),
    )


# ── Clock ────────────────────────────────────────────────────────


def _now(clock: Clock | None, like: Any) -> datetime:
    if clock is not None:
        return clock()
    if isinstance(like, datetime) and like.tzinfo is not None:
        return datetime.now(timezone.utc)
    return datetime.now()


def _as_date(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


def _reference(value: date, clock: Clock | None) -> date:
    """The current moment expressed at the same granularity as *value*."""
    now = _now(clock, value)
    if isinstance(value, datetime):
        return now
    return now.date()


def _range(
    hint: str,
    predicate: Callable[[Any], bool],
    code: ErrorCode = ErrorCode.OUT_OF_RANGE,
) -> Constraint[Any]:
    return Constraint(hint=hint, code=code, predicate=optional(predicate))


# ── Fixed bounds ─────────────────────────────────────────────────


def is_before(bound: date, message: str | None = None) -> Constraint[Any]:
    return _range(message or f"Must be before {bound}", lambda v: v < bound)


def is_after(bound: date, message: str | None = None) -> Constraint[Any]:
    return _range(message or f"Must be after {bound}", lambda v: v > bound)


def is_between(start: date, end: date, message: str | None = None) -> Constraint[Any]:
    """Inclusive on both ends."""
    require_bounds(start, end)
    return _range(
        message or f"Must be between {start} and {end}", lambda v: start <= v <= end
    )


# ── Relative to now ──────────────────────────────────────────────


def is_past(
    message: str | None = None, *, clock: Clock | None = None
) -> Constraint[Any]:
    return _range(
        message or "Must be in the past", lambda v: v < _reference(v, clock)
    )


def is_future(
    message: str | None = None, *, clock: Clock | None = None
) -> Constraint[Any]:
    return _range(
        message or "Must be in the future", lambda v: v > _reference(v, clock)
    )


def is_past_or_today(
    message: str | None = None, *, clock: Clock | None = None
) -> Constraint[Any]:
    return _range(
        message or "Must be today or in the past",
        lambda v: _as_date(v) <= _now(clock, v).date(),
    )


def is_future_or_today(
    message: str | None = None, *, clock: Clock | None = None
) -> Constraint[Any]:
    return _range(
        message or "Must be today or in the future",
        lambda v: _as_date(v) >= _now(clock, v).date(),
    )


def is_today(
    message: str | None = None, *, clock: Clock | None = None
) -> Constraint[Any]:
    return _range(
        message or "Must be today",
        lambda v: _as_date(v) == _now(clock, v).date(),
        ErrorCode.INVALID_VALUE,
    )


def is_within_next(
    window: timedelta, message: str | None = None, *, clock: Clock | None = None
) -> Constraint[datetime | None]:
    require(window >= timedelta(0), "window must not be negative")

    def _within(value: datetime) -> bool:
        now = _now(clock, value)
        return now <= value <= now + window

    return _range(message or f"Must be within the next {window}", _within)


def is_within_past(
    window: timedelta, message: str | None = None, *, clock: Clock | None = None
) -> Constraint[datetime | None]:
    require(window >= timedelta(0), "window must not be negative")

    def _within(value: datetime) -> bool:
        now = _now(clock, value)
        return now - window <= value <= now

    return _range(message or f"Must be within the past {window}", _within)


# ── Age ──────────────────────────────────────────────────────────


def calculate_age(birth_date: date, reference_date: date) -> int:
    """Completed years between *birth_date* and *reference_date*."""
    years = reference_date.year - birth_date.year
    if (reference_date.month, reference_date.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def _age(value: date, clock: Clock | None) -> int:
    return calculate_age(_as_date(value), _now(clock, value).date())


def age_at_least(
    min_age: int, message: str | None = None, *, clock: Clock | None = None
) -> Constraint[date | None]:
    return _range(
        message or f"Must be at least {min_age} years old",
        lambda v: _age(v, clock) >= min_age,
    )


def age_at_most(
    max_age: int, message: str | None = None, *, clock: Clock | None = None
) -> Constraint[date | None]:
    return _range(
        message or f"Must be at most {max_age} years old",
        lambda v: _age(v, clock) <= max_age,
    )


def age_between(
    min_age: int,
    max_age: int,
    message: str | None = None,
    *,
    clock: Clock | None = None,
) -> Constraint[date | None]:
    require_bounds(min_age, max_age)
    return _range(
        message or f"Must be between {min_age} and {max_age} years old",
        lambda v: min_age <= _age(v, clock) <= max_age,
    )


# ── Durations ────────────────────────────────────────────────────


def duration_positive(message: str | None = None) -> Constraint[timedelta | None]:
    return _range(message or "Duration must be positive", lambda v: v > timedelta(0))


def duration_negative(message: str | None = None) -> Constraint[timedelta | None]:
    return _range(message or "Duration must be negative", lambda v: v < timedelta(0))


def duration_at_least(
    minimum: timedelta, message: str | None = None
) -> Constraint[timedelta | None]:
    return _range(
        message or f"Duration must be at least {minimum}", lambda v: v >= minimum
    )


def duration_at_most(
    maximum: timedelta, message: str | None = None
) -> Constraint[timedelta | None]:
    return _range(
        message or f"Duration must be at most {maximum}", lambda v: v <= maximum
    )


def duration_between(
    minimum: timedelta, maximum: timedelta, message: str | None = None
) -> Constraint[timedelta | None]:
    require_bounds(minimum, maximum)
    return _range(
        message or f"Duration must be between {minimum} and {maximum}",
        lambda v: minimum <= v <= maximum,
    )
