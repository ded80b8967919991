"""build_pipeline: compose middleware around a handler."""

from __future__ import annotations

from functools import partial, reduce
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..ports.middleware import IMiddleware, NextHandler


async def _invoke(
    middleware: IMiddleware, next_handler: NextHandler, message: Any
) -> Any:
    return await middleware(message, next_handler)


def build_pipeline(
    middlewares: Sequence[IMiddleware], handler: NextHandler
) -> NextHandler:
    """Wrap *handler* so each message flows through *middlewares* first.

    ``middlewares[0]`` is the outermost layer: it sees the message first and
    the handler's result last. An empty sequence returns *handler* itself.
    """
    return reduce(
        lambda inner, middleware: partial(_invoke, middleware, inner),
        reversed(middlewares),
        handler,
    )
