"""Validation outcome model: ErrorCode, ValidationErrorDetail, Success, Failure."""

from __future__ import annotations

from .codes import ErrorCode
from .result import (
    SUCCESS,
    Failure,
    Success,
    ValidationErrorDetail,
    ValidationResult,
)

__all__ = [
    "SUCCESS",
    "ErrorCode",
    "Failure",
    "Success",
    "ValidationErrorDetail",
    "ValidationResult",
]
