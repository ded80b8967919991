"""ResponseValidator: status and body validation for httpx responses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar, cast

import httpx
from pydantic import ValidationError as PydanticValidationError

from ..primitives.exceptions import (
    ClientStatusError,
    ClientValidationFailedError,
    ValidatorNotFoundError,
)
from ..validation.result import Failure
from .config import ClientValidationConfig
from .gateway import failure_from_pydantic

if TYPE_CHECKING:
    from collections.abc import Callable

    from .typed_registry import TypeValidatorRegistry

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _url_of(response: httpx.Response) -> str | None:
    try:
        return str(response.request.url)
    except RuntimeError:
        # Response built without a request
        return None


def _body_text(response: httpx.Response) -> str | None:
    try:
        return response.text
    except httpx.ResponseNotRead:
        return None


class ResponseValidator:
    """Validates what an HTTP API sends back.

    Bodies are hydrated into the requested model and checked by the
    validator registered for it in a :class:`TypeValidatorRegistry`.

    Usage::

        responses = ResponseValidator(registry)

        async with httpx.AsyncClient(
            event_hooks={"response": [responses.status_hook]}
        ) as client:
            order = await responses.get_and_validate(client, url, Order)
    """

    def __init__(
        self,
        registry: TypeValidatorRegistry,
        config: ClientValidationConfig | None = None,
    ) -> None:
        self.registry = registry
        self.config = config or ClientValidationConfig()

    # ── Status ───────────────────────────────────────────────────

    def check_status(self, response: httpx.Response) -> None:
        """Raise :class:`ClientStatusError` for a status that is not accepted."""
        if self.config.accepts(response.status_code):
            return
        url = _url_of(response)
        logger.warning("Unexpected status %d from %s", response.status_code, url)
        raise ClientStatusError(response.status_code, url, _body_text(response))

    async def status_hook(self, response: httpx.Response) -> None:
        """httpx ``response`` event hook running :meth:`check_status`."""
        if not self.config.accepts(response.status_code):
            await response.aread()
        self.check_status(response)

    # ── Bodies ───────────────────────────────────────────────────

    def validate(
        self,
        obj: T,
        *,
        url: str | None = None,
        status_code: int | None = None,
    ) -> T:
        """Return *obj* if its validator passes it.

        Raises :class:`ValidatorNotFoundError` when its type has no
        validator and :class:`ClientValidationFailedError` on failure.
        """
        typed = self.registry.require(type(obj))
        if self.config.fail_fast:
            result = typed.validate_first(obj)
        else:
            result = typed.validate(obj)
        if isinstance(result, Failure):
            logger.warning(
                "Response from %s failed validation: %d error(s)",
                url,
                result.error_count,
            )
            raise ClientValidationFailedError(result, url, status_code)
        return obj

    def parse(self, model_type: type[T], response: httpx.Response) -> T:
        """Hydrate *model_type* from the response's JSON body."""
        payload = response.json()
        model_validate = getattr(model_type, "model_validate", None)
        if model_validate is None:
            return model_type(**payload)
        try:
            return cast("T", model_validate(payload))
        except PydanticValidationError as exc:
            raise ClientValidationFailedError(
                failure_from_pydantic(exc), _url_of(response), response.status_code
            ) from exc

    def body_and_validate(self, response: httpx.Response, model_type: type[T]) -> T:
        if self.config.check_status:
            self.check_status(response)
        obj = self.parse(model_type, response)
        return self.validate(
            obj, url=_url_of(response), status_code=response.status_code
        )

    def body_and_validate_or_none(
        self,
        response: httpx.Response,
        model_type: type[T],
        on_error: Callable[[Failure], Any] | None = None,
    ) -> T | None:
        """Lenient variant of :meth:`body_and_validate`.

        A failed validation returns ``None`` after handing the failure to
        *on_error*. Models without a validator are returned unchecked.
        """
        try:
            return self.body_and_validate(response, model_type)
        except ClientValidationFailedError as exc:
            if on_error is not None:
                on_error(exc.result)
            return None
        except ValidatorNotFoundError:
            logger.debug("No validator for %s, returning body", model_type.__name__)
            return self.parse(model_type, response)

    # ── Requests ─────────────────────────────────────────────────

    async def request_and_validate(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        model_type: type[T],
        **kwargs: Any,
    ) -> T:
        response = await client.request(method, url, **kwargs)
        return self.body_and_validate(response, model_type)

    async def get_and_validate(
        self, client: httpx.AsyncClient, url: str, model_type: type[T], **kwargs: Any
    ) -> T:
        return await self.request_and_validate(client, "GET", url, model_type, **kwargs)

    async def post_and_validate(
        self, client: httpx.AsyncClient, url: str, model_type: type[T], **kwargs: Any
    ) -> T:
        return await self.request_and_validate(
            client, "POST", url, model_type, **kwargs
        )
