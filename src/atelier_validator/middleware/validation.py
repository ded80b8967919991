"""ValidatorMiddleware: validates messages before the handler runs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..ports.middleware import IMiddleware
from ..primitives.exceptions import ValidationFailedError
from ..validation.result import Failure

if TYPE_CHECKING:
    from ..integration.gateway import ValidationGateway
    from ..ports.middleware import NextHandler

logger = logging.getLogger("atelier_validator.middleware")


class ValidatorMiddleware(IMiddleware):
    """Runs the gateway's validation before the handler.

    A failure raises :class:`ValidationFailedError` carrying the
    ``Failure``; the handler is not called. Messages whose type has no
    validator pass through unless the gateway's config sets
    ``require_validator``.
    """

    def __init__(self, gateway: ValidationGateway) -> None:
        self._gateway = gateway

    async def __call__(
        self,
        message: Any,
        next_handler: NextHandler,
    ) -> Any:
        """Validate the message before passing to next handler."""
        result = self._gateway.validate(message)
        if isinstance(result, Failure):
            logger.warning(
                "Rejected %s: %d validation error(s)",
                type(message).__name__,
                result.error_count,
            )
            raise ValidationFailedError(result)
        return await next_handler(message)
