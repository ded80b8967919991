from atelier_validator.ports.middleware import IMiddleware, NextHandler
from atelier_validator.ports.validation import IValidator

__all__ = [
    "IMiddleware",
    "NextHandler",
    "IValidator",
]
