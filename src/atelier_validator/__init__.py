"""atelier-validator: typed, composable validation rules for Python objects.

Rules are registered once per target type, frozen by ``build()`` and then
evaluated in collect-all (``validate``) or fail-fast (``validate_first``)
mode. Failures are values, not exceptions.
"""

from __future__ import annotations

# ── Constraints ──────────────────────────────────────────────────
from .constraints import Constraint, CrossFieldCheck, render_value

# ── Engine ───────────────────────────────────────────────────────
from .engine import (
    FieldIdentity,
    FieldRuleBuilder,
    FieldRuleSet,
    RegistrySnapshot,
    ValidationEngine,
    Validator,
    ValidatorBuilder,
    ValidatorRegistry,
    build_validator,
)

# ── Integration ──────────────────────────────────────────────────
from .integration import (
    ClientValidationConfig,
    ClientValidationErrorResponse,
    ResponseValidator,
    TypedValidator,
    TypeValidatorRegistry,
    ValidationConfig,
    ValidationErrorDetailDto,
    ValidationErrorResponse,
    ValidationGateway,
)

# ── Middleware ───────────────────────────────────────────────────
from .middleware import ValidatorMiddleware, build_pipeline

# ── Ports ────────────────────────────────────────────────────────
from .ports import IMiddleware, IValidator

# ── Primitives ───────────────────────────────────────────────────
from .primitives import (
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

# ── Validation results ───────────────────────────────────────────
from .validation import (
    SUCCESS,
    ErrorCode,
    Failure,
    Success,
    ValidationErrorDetail,
    ValidationResult,
)

__version__ = "0.1.0"

__all__ = [
    "SUCCESS",
    "AtelierValidatorError",
    "ClientStatusError",
    "ClientValidationConfig",
    "ClientValidationErrorResponse",
    "ClientValidationFailedError",
    "ConfigurationError",
    "Constraint",
    "CrossFieldCheck",
    "DuplicateValidatorError",
    "ErrorCode",
    "Failure",
    "FieldIdentity",
    "FieldRuleBuilder",
    "FieldRuleSet",
    "IMiddleware",
    "IValidator",
    "RegistryFrozenError",
    "RegistrySnapshot",
    "ResponseValidator",
    "Success",
    "TypeValidatorRegistry",
    "TypedValidator",
    "ValidationConfig",
    "ValidationEngine",
    "ValidationErrorDetail",
    "ValidationErrorDetailDto",
    "ValidationErrorResponse",
    "ValidationFailedError",
    "ValidationGateway",
    "ValidationResult",
    "Validator",
    "ValidatorBuilder",
    "ValidatorMiddleware",
    "ValidatorNotFoundError",
    "ValidatorRegistry",
    "ValidatorTypeMismatchError",
    "build_pipeline",
    "build_validator",
    "render_value",
]
