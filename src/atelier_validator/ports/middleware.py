"""IMiddleware: a validation step wrapped around an async handler."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, runtime_checkable

#: The rest of the chain: the next middleware, or the handler itself.
NextHandler = Callable[[Any], Awaitable[Any]]


@runtime_checkable
class IMiddleware(Protocol):
    """One layer of a :func:`~atelier_validator.middleware.build_pipeline` chain.

    A layer receives the incoming message (a request payload or parsed
    model) and either rejects it by raising, typically
    :class:`~atelier_validator.primitives.ValidationFailedError`, or awaits
    ``next_handler(message)`` and returns its result.
    """

    async def __call__(self, message: Any, next_handler: NextHandler) -> Any: ...
