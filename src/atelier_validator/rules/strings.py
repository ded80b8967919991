"""String rules: presence, length, character classes and common formats.

``None`` passes every rule here except :func:`not_blank` and :func:`not_empty`.
"""

from __future__ import annotations

import re
from re import Pattern as RegexPattern

from ..constraints.constraint import Constraint
from ..validation.codes import ErrorCode
from .helpers import (
    is_common_special_char,
    is_valid_luhn,
    optional,
    password_message,
    require,
    require_non_negative,
)

EMAIL_REGEX = re.compile(
    r"[a-zA-Z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-zA-Z0-9!#$%&'*+/=?^_`{|}~-]+)*@[a-zA-Z0-9]"
    r"(?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
)
URL_REGEX = re.compile(
    r"https?://[-\w.]+(?::\d+)?(?:/[\w/_.-]*(?:\?[\w&=%.-]*)?(?:#[\w.-]*)?)?"
)
# E.164
PHONE_REGEX = re.compile(r"\+?[1-9]\d{1,14}")
_PHONE_SEPARATORS = re.compile(r"[\s()-]")
_CARD_SEPARATORS = re.compile(r"[\s-]")


def not_blank(message: str | None = None) -> Constraint[str | None]:
    return Constraint(
        hint=message or "Cannot be blank",
        code=ErrorCode.NOT_BLANK,
        predicate=lambda value: value is not None and bool(value.strip()),
    )


def not_empty(message: str | None = None) -> Constraint[str | None]:
    return Constraint(
        hint=message or "Cannot be empty",
        code=ErrorCode.NOT_EMPTY,
        predicate=lambda value: value is not None and len(value) > 0,
    )


# ── Length ───────────────────────────────────────────────────────


def min_length(minimum: int, message: str | None = None) -> Constraint[str | None]:
    require_non_negative(min_length=minimum)
    return Constraint(
        hint=message or f"Must be at least {minimum} characters",
        code=ErrorCode.TOO_SHORT,
        predicate=optional(lambda value: len(value) >= minimum),
    )


def max_length(maximum: int, message: str | None = None) -> Constraint[str | None]:
    require_non_negative(max_length=maximum)
    return Constraint(
        hint=message or f"Must be at most {maximum} characters",
        code=ErrorCode.TOO_LONG,
        predicate=optional(lambda value: len(value) <= maximum),
    )


def length(
    minimum: int, maximum: int, message: str | None = None
) -> Constraint[str | None]:
    require_non_negative(min_length=minimum, max_length=maximum)
    require(minimum <= maximum, "min length must be <= max length")
    return Constraint(
        hint=message or f"Must be between {minimum} and {maximum} characters",
        code=ErrorCode.OUT_OF_RANGE,
        predicate=optional(lambda value: minimum <= len(value) <= maximum),
    )


def exact_length(expected: int, message: str | None = None) -> Constraint[str | None]:
    require_non_negative(exact_length=expected)
    return Constraint(
        hint=message or f"Must be exactly {expected} characters",
        code=ErrorCode.OUT_OF_RANGE,
        predicate=optional(lambda value: len(value) == expected),
    )


# ── Content ──────────────────────────────────────────────────────


def matches(expected: str, message: str | None = None) -> Constraint[str | None]:
    """Exact string equality."""
    return Constraint(
        hint=message or f"Must match '{expected}'",
        code=ErrorCode.INVALID_VALUE,
        predicate=optional(lambda value: value == expected),
    )


def matches_pattern(
    pattern: str | RegexPattern[str], message: str | None = None
) -> Constraint[str | None]:
    """The whole value must match *pattern*."""
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    return Constraint(
        hint=message or "Invalid format",
        code=ErrorCode.INVALID_FORMAT,
        predicate=optional(lambda value: regex.fullmatch(value) is not None),
    )


def alphanumeric(message: str | None = None) -> Constraint[str | None]:
    return Constraint(
        hint=message or "Must contain only letters and numbers",
        code=ErrorCode.INVALID_FORMAT,
        predicate=optional(lambda value: all(c.isalnum() for c in value)),
    )


def alpha(message: str | None = None) -> Constraint[str | None]:
    return Constraint(
        hint=message or "Must contain only letters",
        code=ErrorCode.INVALID_FORMAT,
        predicate=optional(lambda value: all(c.isalpha() for c in value)),
    )


def numeric(message: str | None = None) -> Constraint[str | None]:
    return Constraint(
        hint=message or "Must contain only numbers",
        code=ErrorCode.INVALID_FORMAT,
        predicate=optional(lambda value: all(c.isdigit() for c in value)),
    )


def uppercase(message: str | None = None) -> Constraint[str | None]:
    return Constraint(
        hint=message or "Must be uppercase",
        code=ErrorCode.INVALID_FORMAT,
        predicate=optional(lambda value: value == value.upper()),
    )


def lowercase(message: str | None = None) -> Constraint[str | None]:
    return Constraint(
        hint=message or "Must be lowercase",
        code=ErrorCode.INVALID_FORMAT,
        predicate=optional(lambda value: value == value.lower()),
    )


# ── Formats ──────────────────────────────────────────────────────


def email(message: str | None = None) -> Constraint[str | None]:
    """Blank strings pass; pair with :func:`not_blank` to require a value."""
    return Constraint(
        hint=message or "Must be a valid email address",
        code=ErrorCode.INVALID_EMAIL,
        predicate=optional(
            lambda value: not value.strip() or EMAIL_REGEX.fullmatch(value) is not None
        ),
    )


def url(message: str | None = None) -> Constraint[str | None]:
    """Blank strings pass, as with :func:`email`."""
    return Constraint(
        hint=message or "Must be a valid URL",
        code=ErrorCode.INVALID_FORMAT,
        predicate=optional(
            lambda value: not value.strip() or URL_REGEX.fullmatch(value) is not None
        ),
    )


def phone_number(message: str | None = None) -> Constraint[str | None]:
    """E.164-style number; spaces, parentheses and dashes are ignored."""
    return Constraint(
        hint=message or "Must be a valid phone number",
        code=ErrorCode.INVALID_FORMAT,
        predicate=optional(
            lambda value: PHONE_REGEX.fullmatch(_PHONE_SEPARATORS.sub("", value))
            is not None
        ),
    )


def credit_card(message: str | None = None) -> Constraint[str | None]:
    """13 to 19 digits (spaces and dashes ignored) passing the Luhn check."""

    def _valid(value: str) -> bool:
        cleaned = _CARD_SEPARATORS.sub("", value)
        return 13 <= len(cleaned) <= 19 and is_valid_luhn(cleaned)

    return Constraint(
        hint=message or "Must be a valid credit card number",
        code=ErrorCode.INVALID_FORMAT,
        predicate=optional(_valid),
    )


def strong_password(
    min_length: int = 8,
    require_uppercase: bool = True,
    require_lowercase: bool = True,
    require_digit: bool = True,
    require_special_char: bool = True,
    message: str | None = None,
) -> Constraint[str | None]:
    require_non_negative(min_length=min_length)

    def _strong(password: str) -> bool:
        return (
            len(password) >= min_length
            and (not require_uppercase or any(c.isupper() for c in password))
            and (not require_lowercase or any(c.islower() for c in password))
            and (not require_digit or any(c.isdigit() for c in password))
            and (
                not require_special_char
                or any(is_common_special_char(c) for c in password)
            )
        )

    return Constraint(
        hint=message
        or password_message(
            min_length,
            require_uppercase,
            require_lowercase,
            require_digit,
            require_special_char,
        ),
        code=ErrorCode.WEAK_PASSWORD,
        predicate=optional(_strong),
    )
