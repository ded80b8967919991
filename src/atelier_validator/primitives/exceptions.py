"""Configuration and boundary exceptions for atelier-validator.

Validation failures are data (:class:`~atelier_validator.validation.result.Failure`)
and never raised by the engine itself. The classes below cover programmer errors
and the explicit "turn a failure into an exception" paths.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..validation.result import Failure


_KNOWN_STATUSES = frozenset(status.value for status in HTTPStatus)


class AtelierValidatorError(Exception):
    """Root exception for the entire atelier-validator package."""


class ConfigurationError(AtelierValidatorError, ValueError):
    """Raised when a validator or rule is configured inconsistently.

    Usage: rule factories raise this for impossible bounds (``min > max``),
    registries raise it for registrations that break their invariants.
    """


class RegistryFrozenError(ConfigurationError):
    """Raised when a rule is registered after the registry was built."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(
            f"Cannot register a rule for field '{field_name}': "
            "the registry has already been built and is read-only"
        )


class DuplicateValidatorError(ConfigurationError):
    """Raised when two different validators are registered for one type."""

    def __init__(self, target_type: type[Any]) -> None:
        self.target_type = target_type
        super().__init__(
            f"Duplicate validator for {target_type.__name__}: "
            "a different validator is already registered"
        )


class ValidatorTypeMismatchError(ConfigurationError, TypeError):
    """Raised when a type-bound validator receives an object of another type."""

    def __init__(self, expected: type[Any], received: type[Any]) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            "Type mismatch in validator:\n"
            f"  Expected: {expected.__name__}\n"
            f"  Received: {received.__name__}\n"
            "Make sure you're validating the correct object type."
        )


class ValidatorNotFoundError(AtelierValidatorError, LookupError):
    """Raised when no validator is registered for a runtime type."""

    def __init__(self, target_type: type[Any]) -> None:
        self.target_type = target_type
        super().__init__(f"No validator registered for {target_type.__name__}")


class ValidationFailedError(AtelierValidatorError):
    """Raised when a validation failure has to leave the result-value world.

    Carries the originating :class:`Failure` so callers can still read
    ``errors``, ``errors_by_field`` and friends.
    """

    def __init__(self, result: Failure, message: str | None = None) -> None:
        self.result = result
        super().__init__(
            message or f"Validation failed with {result.error_count} error(s)"
        )

    @property
    def errors(self) -> tuple[Any, ...]:
        return self.result.errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_FAILED",
            "message": str(self),
            "errors": [detail.to_dict() for detail in self.result.errors],
        }


# ── HTTP client side ─────────────────────────────────────────────


class ClientValidationFailedError(ValidationFailedError):
    """Raised when a response body fails its validator.

    Usage::

        try:
            order = await responses.get_and_validate(client, url, Order)
        except ClientValidationFailedError as exc:
            if exc.has_error_for("total"):
                ...
    """

    def __init__(
        self,
        result: Failure,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        message = f"Response validation failed with {result.error_count} error(s)"
        if url is not None:
            message += f" for {url}"
        if status_code is not None:
            message += f" (status: {status_code})"
        super().__init__(result, message)

    def errors_for(self, field_name: str) -> list[Any]:
        return self.result.errors_for(field_name)

    def has_error_for(self, field_name: str) -> bool:
        return self.result.has_error_for(field_name)


class ClientStatusError(AtelierValidatorError):
    """Raised when a response arrives with a status code that is not accepted."""

    def __init__(
        self,
        status_code: int,
        url: str | None = None,
        response_body: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.url = url
        self.response_body = response_body
        message = f"Unexpected status code: {status_code}"
        if status_code in _KNOWN_STATUSES:
            message += f" {HTTPStatus(status_code).phrase}"
        if url is not None:
            message += f" for {url}"
        super().__init__(message)

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code <= 499

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status_code <= 599

    def response_body_or(self, default: str = "No response body") -> str:
        return self.response_body if self.response_body is not None else default
