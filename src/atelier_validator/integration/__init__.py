"""HTTP boundary: type-keyed registry, request gateway, response validator."""

from .client import ResponseValidator
from .config import (
    DEFAULT_ACCEPTED_STATUS_CODES,
    ClientValidationConfig,
    ValidationConfig,
    default_error_response,
)
from .gateway import ValidationGateway, failure_from_pydantic
from .responses import (
    ClientValidationErrorDetailDto,
    ClientValidationErrorResponse,
    ValidationErrorDetailDto,
    ValidationErrorResponse,
)
from .typed_registry import TypedValidator, TypeValidatorRegistry

__all__ = [
    "DEFAULT_ACCEPTED_STATUS_CODES",
    "ClientValidationConfig",
    "ClientValidationErrorDetailDto",
    "ClientValidationErrorResponse",
    "ResponseValidator",
    "TypeValidatorRegistry",
    "TypedValidator",
    "ValidationConfig",
    "ValidationErrorDetailDto",
    "ValidationErrorResponse",
    "ValidationGateway",
    "default_error_response",
    "failure_from_pydantic",
]
