"""Shared helpers for the rule catalogue."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable

COMMON_SPECIAL_CHARS = frozenset("!@#$%^&*()_+-=[]{}|;:',.<>?/~`\"")


def optional(predicate: Callable[[Any], bool]) -> Callable[[Any], bool]:
    """Let ``None`` pass; presence is the job of the dedicated presence rules."""

    def _check(value: Any) -> bool:
        return value is None or bool(predicate(value))

    return _check


def require(condition: bool, message: str) -> None:
    """Fail fast on an impossible rule configuration."""
    if not condition:
        raise ConfigurationError(message)


def require_bounds(minimum: Any, maximum: Any, *, strict: bool = False) -> None:
    if strict:
        require(minimum < maximum, "min must be < max for exclusive between")
    else:
        require(minimum <= maximum, "min must be <= max")


def require_non_negative(**values: int | None) -> None:
    for name, value in values.items():
        if value is not None and value < 0:
            raise ConfigurationError(f"{name} must not be negative: {value}")


def join_values(values: Any) -> str:
    return ", ".join(str(v) for v in values)


def is_common_special_char(char: str) -> bool:
    return char in COMMON_SPECIAL_CHARS


def is_valid_luhn(card_number: str) -> bool:
    """Luhn checksum over a string of ASCII digits."""
    if not card_number or not all(c in "0123456789" for c in card_number):
        return False

    total = 0
    for index, char in enumerate(reversed(card_number)):
        digit = int(char)
        if index % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def password_message(
    min_length: int,
    require_uppercase: bool,
    require_lowercase: bool,
    require_digit: bool,
    require_special_char: bool,
) -> str:
    requirements = [f"at least {min_length} characters"]
    if require_uppercase:
        requirements.append("uppercase letter")
    if require_lowercase:
        requirements.append("lowercase letter")
    if require_digit:
        requirements.append("digit")
    if require_special_char:
        requirements.append("special character")
    return f"Password must contain {', '.join(requirements)}"
