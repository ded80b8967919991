"""ValidationGateway: parse, validate and report at a service boundary."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar, cast

from pydantic import ValidationError as PydanticValidationError

from ..primitives.exceptions import ValidationFailedError
from ..validation.codes import ErrorCode
from ..validation.result import Failure, ValidationErrorDetail, ValidationResult
from .config import ValidationConfig

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from .typed_registry import TypeValidatorRegistry

T = TypeVar("T")

logger = logging.getLogger(__name__)


def failure_from_pydantic(exc: PydanticValidationError) -> Failure:
    """Convert a pydantic parsing error into a :class:`Failure`."""
    details: list[ValidationErrorDetail] = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ())) or "__root__"
        details.append(
            ValidationErrorDetail(
                field_name=loc,
                message=error.get("msg", "validation error"),
                code=ErrorCode.INVALID_FORMAT,
                actual_value=str(error.get("input")),
            )
        )
    return Failure(tuple(details))


class ValidationGateway:
    """Entry point for request handling code.

    Usage::

        gateway = ValidationGateway(registry, ValidationConfig(fail_fast=True))
        gateway.check_configuration()

        try:
            user = gateway.parse_and_validate(CreateUser, payload)
        except ValidationFailedError as exc:
            status, body = gateway.error_response(exc.result)
    """

    def __init__(
        self,
        registry: TypeValidatorRegistry,
        config: ValidationConfig | None = None,
    ) -> None:
        self.registry = registry
        self.config = config or ValidationConfig()

    def check_configuration(self) -> None:
        self.registry.check_configuration(self.config)

    # ── Parsing ──────────────────────────────────────────────────

    def parse(self, model_type: type[T], payload: Mapping[str, Any]) -> T:
        """Hydrate *model_type* from a payload mapping.

        Pydantic models go through ``model_validate``; their parsing errors
        are reported as a :class:`ValidationFailedError`. Other classes are
        called with the payload as keyword arguments.
        """
        model_validate = getattr(model_type, "model_validate", None)
        if model_validate is not None:
            try:
                return cast("T", model_validate(payload))
            except PydanticValidationError as exc:
                raise ValidationFailedError(failure_from_pydantic(exc)) from exc
        return model_type(**payload)

    def parse_and_validate(self, model_type: type[T], payload: Mapping[str, Any]) -> T:
        obj = self.parse(model_type, payload)
        self.validate(obj).raise_if_failure()
        return obj

    # ── Validation ───────────────────────────────────────────────

    def validate(self, obj: Any) -> ValidationResult:
        """Validate *obj* by runtime type, honouring ``fail_fast``.

        Objects without a validator are a :class:`ValidatorNotFoundError`
        when ``require_validator`` is set and pass otherwise.
        """
        typed = self.registry.get(type(obj))
        if typed is None:
            if self.config.require_validator:
                self.registry.require(type(obj))
            logger.debug("No validator for %s, passing through", type(obj).__name__)
            return ValidationResult.success()
        if self.config.fail_fast:
            return typed.validate_first(obj)
        return typed.validate(obj)

    def validate_batch(
        self, objects: Iterable[Any]
    ) -> tuple[list[Any], list[tuple[Any, Failure]]]:
        """Split *objects* into the valid ones and ``(object, failure)`` pairs."""
        valid: list[Any] = []
        invalid: list[tuple[Any, Failure]] = []
        for obj in objects:
            result = self.validate(obj)
            if isinstance(result, Failure):
                invalid.append((obj, result))
            else:
                valid.append(obj)
        logger.debug(
            "Validated batch: %d valid, %d invalid", len(valid), len(invalid)
        )
        return valid, invalid

    # ── Reporting ────────────────────────────────────────────────

    def error_response(self, failure: Failure) -> tuple[int, Any]:
        """Return ``(status_code, body)`` for a rejected request."""
        return self.config.error_status_code, self.config.error_response_builder(
            failure
        )
