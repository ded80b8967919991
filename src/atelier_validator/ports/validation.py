"""IValidator: the two entry points consumers of the engine rely on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from ..validation.result import ValidationResult

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class IValidator(Protocol[T_contra]):
    """Protocol for validators.

    Implemented by :class:`~atelier_validator.engine.validator.Validator` and
    by the type-checking wrappers of
    :class:`~atelier_validator.integration.typed_registry.TypeValidatorRegistry`.
    """

    def validate(self, obj: T_contra) -> ValidationResult:
        """Return ``Success`` or a ``Failure`` holding every distinct error."""
        ...

    def validate_first(self, obj: T_contra) -> ValidationResult:
        """Return ``Success`` or a ``Failure`` holding exactly one error.

        The error must equal the first one :meth:`validate` would report.
        """
        ...
