"""Validator: the engine-facing contract bound to one target type."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .executor import ValidationEngine

if TYPE_CHECKING:
    from ..validation.result import ValidationResult
    from .registry import RegistrySnapshot

T = TypeVar("T")


class Validator(Generic[T]):
    """Validates instances of ``T`` against a frozen rule snapshot.

    Produced by :meth:`ValidatorBuilder.build`; satisfies
    :class:`~atelier_validator.ports.validation.IValidator`.

    Usage::

        result = user_validator.validate(user)
        first = user_validator.validate_first(user)
    """

    def __init__(
        self, snapshot: RegistrySnapshot, target_type: type[T] | None = None
    ) -> None:
        self._engine = ValidationEngine(snapshot)
        self.target_type = target_type

    @property
    def name(self) -> str:
        if self._engine.snapshot.name:
            return self._engine.snapshot.name
        if self.target_type is not None:
            return self.target_type.__name__
        return "<anonymous>"

    @property
    def registry(self) -> RegistrySnapshot:
        return self._engine.snapshot

    def validate(self, obj: T) -> ValidationResult:
        """Run every rule and return all distinct failures."""
        return self._engine.validate(obj)

    def validate_first(self, obj: T) -> ValidationResult:
        """Stop at the first failing rule."""
        return self._engine.validate_first(obj)

    def __repr__(self) -> str:
        fields: Any = self.registry.field_names()
        return f"Validator(name={self.name!r}, fields={fields!r})"
