"""Middleware components."""

from .pipeline import build_pipeline
from .validation import ValidatorMiddleware

__all__ = [
    "ValidatorMiddleware",
    "build_pipeline",
]
