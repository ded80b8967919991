import dataclasses
import logging
from unittest.mock import AsyncMock

import pytest

from atelier_validator.engine import build_validator
from atelier_validator.integration import (
    TypeValidatorRegistry,
    ValidationConfig,
    ValidationGateway,
)
from atelier_validator.middleware import ValidatorMiddleware, build_pipeline
from atelier_validator.ports import IMiddleware
from atelier_validator.primitives.exceptions import (
    ValidationFailedError,
    ValidatorNotFoundError,
)
from atelier_validator.rules import strings

# --- Test Models ---


@dataclasses.dataclass
class PostComment:
    body: str


@dataclasses.dataclass
class Ping:
    pass


def _gateway(**config) -> ValidationGateway:
    registry = TypeValidatorRegistry()
    registry.register(
        PostComment,
        build_validator(
            PostComment,
            lambda v: v.field("body", strings.not_blank(), strings.max_length(5)),
        ),
    )
    return ValidationGateway(registry, ValidationConfig(**config))


# --- ValidatorMiddleware ---


@pytest.mark.asyncio()
async def test_validator_middleware_success() -> None:
    middleware = ValidatorMiddleware(_gateway())
    message = PostComment(body="hi")
    next_fn = AsyncMock(return_value="ok")

    result = await middleware(message, next_fn)

    assert result == "ok"
    next_fn.assert_called_once_with(message)


@pytest.mark.asyncio()
async def test_validator_middleware_failure(caplog) -> None:
    caplog.set_level(logging.WARNING)
    middleware = ValidatorMiddleware(_gateway())
    next_fn = AsyncMock()

    with pytest.raises(ValidationFailedError) as exc_info:
        await middleware(PostComment(body=" "), next_fn)

    next_fn.assert_not_called()
    assert exc_info.value.result.errors[0].field_name == "body"
    assert "Rejected PostComment: 1 validation error(s)" in caplog.text


@pytest.mark.asyncio()
async def test_validator_middleware_fail_fast() -> None:
    middleware = ValidatorMiddleware(_gateway(fail_fast=True))

    with pytest.raises(ValidationFailedError) as exc_info:
        await middleware(PostComment(body="       "), AsyncMock())

    assert exc_info.value.result.error_count == 1


@pytest.mark.asyncio()
async def test_validator_middleware_passes_unregistered_types() -> None:
    middleware = ValidatorMiddleware(_gateway(require_validator=False))
    next_fn = AsyncMock(return_value="pong")

    assert await middleware(Ping(), next_fn) == "pong"


@pytest.mark.asyncio()
async def test_validator_middleware_requires_validator() -> None:
    middleware = ValidatorMiddleware(_gateway())

    with pytest.raises(ValidatorNotFoundError):
        await middleware(Ping(), AsyncMock())


def test_validator_middleware_is_imiddleware() -> None:
    assert isinstance(ValidatorMiddleware(_gateway()), IMiddleware)


# --- build_pipeline ---


@pytest.mark.asyncio()
async def test_pipeline_runs_middlewares_outermost_first() -> None:
    calls: list[str] = []

    class Recording:
        def __init__(self, label: str) -> None:
            self.label = label

        async def __call__(self, message, next_handler):
            calls.append(f"{self.label}:in")
            result = await next_handler(message)
            calls.append(f"{self.label}:out")
            return result

    async def handler(message):
        calls.append("handler")
        return message.body.upper()

    pipeline = build_pipeline(
        [Recording("outer"), ValidatorMiddleware(_gateway()), Recording("inner")],
        handler,
    )

    assert await pipeline(PostComment(body="hey")) == "HEY"
    assert calls == ["outer:in", "inner:in", "handler", "inner:out", "outer:out"]


@pytest.mark.asyncio()
async def test_pipeline_stops_at_validation_failure() -> None:
    handler = AsyncMock()
    pipeline = build_pipeline([ValidatorMiddleware(_gateway())], handler)

    with pytest.raises(ValidationFailedError):
        await pipeline(PostComment(body="far too long"))

    handler.assert_not_called()


@pytest.mark.asyncio()
async def test_empty_pipeline_is_the_handler() -> None:
    handler = AsyncMock(return_value=1)

    assert build_pipeline([], handler) is handler
