"""Type-keyed validator registry with runtime type checks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..primitives.exceptions import (
    ConfigurationError,
    DuplicateValidatorError,
    ValidatorNotFoundError,
    ValidatorTypeMismatchError,
)

if TYPE_CHECKING:
    from ..ports.validation import IValidator
    from ..validation.result import ValidationResult
    from .config import ValidationConfig

T = TypeVar("T")

logger = logging.getLogger(__name__)


class TypedValidator(Generic[T]):
    """Binds a validator to ``target_type`` and refuses anything else.

    Raises :class:`ValidatorTypeMismatchError` instead of letting a
    wrong object reach field accessors that would fail obscurely.
    """

    def __init__(self, target_type: type[T], validator: IValidator[T]) -> None:
        self.target_type = target_type
        self.validator = validator

    def _check(self, obj: Any) -> None:
        if not isinstance(obj, self.target_type):
            raise ValidatorTypeMismatchError(self.target_type, type(obj))

    def validate(self, obj: Any) -> ValidationResult:
        self._check(obj)
        return self.validator.validate(obj)

    def validate_first(self, obj: Any) -> ValidationResult:
        self._check(obj)
        return self.validator.validate_first(obj)

    def __repr__(self) -> str:
        return f"TypedValidator({self.target_type.__name__}, {self.validator!r})"


class TypeValidatorRegistry:
    """Maps target types to their validators.

    **Conflict detection:** registering a second, different validator for
    the same type raises :class:`DuplicateValidatorError`; registering the
    same validator again is a no-op.

    Lookup walks the runtime type's MRO, so a validator registered for a
    base class also serves its subclasses unless they have their own.
    """

    def __init__(self) -> None:
        self._validators: dict[type[Any], TypedValidator[Any]] = {}

    # ── Registration ─────────────────────────────────────────────

    def register(self, target_type: type[T], validator: IValidator[T]) -> None:
        existing = self._validators.get(target_type)
        if existing is not None:
            if existing.validator is validator:
                return
            raise DuplicateValidatorError(target_type)
        self._validators[target_type] = TypedValidator(target_type, validator)
        logger.debug("Registered validator for %s", target_type.__name__)

    # ── Lookup ───────────────────────────────────────────────────

    def get(self, target_type: type[Any]) -> TypedValidator[Any] | None:
        for klass in target_type.__mro__:
            typed = self._validators.get(klass)
            if typed is not None:
                return typed
        return None

    def require(self, target_type: type[Any]) -> TypedValidator[Any]:
        typed = self.get(target_type)
        if typed is None:
            raise ValidatorNotFoundError(target_type)
        return typed

    def has_validator(self, target_type: type[Any]) -> bool:
        return self.get(target_type) is not None

    def registered_types(self) -> list[type[Any]]:
        return list(self._validators)

    def __len__(self) -> int:
        return len(self._validators)

    def __contains__(self, target_type: object) -> bool:
        return isinstance(target_type, type) and self.has_validator(target_type)

    # ── Validation ───────────────────────────────────────────────

    def validate(self, obj: Any) -> ValidationResult:
        """Validate *obj* with the validator of its runtime type."""
        return self.require(type(obj)).validate(obj)

    def validate_first(self, obj: Any) -> ValidationResult:
        return self.require(type(obj)).validate_first(obj)

    def check_configuration(self, config: ValidationConfig) -> None:
        """Fail at startup instead of on the first request."""
        if config.validate_at_startup and not self._validators:
            msg = (
                "No validators registered. Register at least one validator "
                "or disable validate_at_startup"
            )
            raise ConfigurationError(msg)
        logger.debug("Validator configuration checked: %d type(s)", len(self))
