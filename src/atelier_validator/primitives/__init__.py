"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import (
    AtelierValidatorError,
    ClientStatusError,
    ClientValidationFailedError,
    ConfigurationError,
    DuplicateValidatorError,
    RegistryFrozenError,
    ValidationFailedError,
    ValidatorNotFoundError,
    ValidatorTypeMismatchError,
)

__all__ = [
    "AtelierValidatorError",
    "ClientStatusError",
    "ClientValidationFailedError",
    "ConfigurationError",
    "DuplicateValidatorError",
    "RegistryFrozenError",
    "ValidationFailedError",
    "ValidatorNotFoundError",
    "ValidatorTypeMismatchError",
]
