"""Settings of the server-side gateway and the client-side response validator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from typing_extensions import Self

from .responses import ValidationErrorResponse

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..validation.result import Failure


def default_error_response(failure: Failure) -> dict[str, Any]:
    return ValidationErrorResponse.from_failure(failure).model_dump()


@dataclass
class ValidationConfig:
    """How a :class:`ValidationGateway` validates and reports.

    ``error_status_code``
        Status returned alongside the error body.
    ``fail_fast``
        Use ``validate_first`` instead of ``validate``.
    ``validate_at_startup``
        Make ``check_configuration()`` fail when no validator is registered.
    ``require_validator``
        Reject messages whose type has no validator instead of passing them on.
    ``error_response_builder``
        Turns a ``Failure`` into the response body.
    """

    error_status_code: int = 400
    fail_fast: bool = False
    validate_at_startup: bool = True
    require_validator: bool = True
    error_response_builder: Callable[[Failure], Any] = field(
        default=default_error_response
    )


DEFAULT_ACCEPTED_STATUS_CODES = frozenset(range(200, 300))
_HTTP_STATUS_CODES = range(100, 600)


@dataclass
class ClientValidationConfig:
    """How a :class:`ResponseValidator` treats incoming responses.

    ``accepted_status_codes``
        Statuses whose bodies are validated; any other raises
        :class:`ClientStatusError`. Defaults to 200-299.
    ``check_status``
        Check the status code before reading the body.
    ``fail_fast``
        Use ``validate_first`` instead of ``validate``.
    """

    accepted_status_codes: frozenset[int] = DEFAULT_ACCEPTED_STATUS_CODES
    check_status: bool = True
    fail_fast: bool = False

    def accept_status_code_range(self, codes: range) -> Self:
        """Accept every HTTP status in *codes*, e.g. ``range(200, 400)``."""
        self.accepted_status_codes = frozenset(
            code for code in codes if code in _HTTP_STATUS_CODES
        )
        return self

    def accept_status_codes(self, *codes: int) -> Self:
        self.accepted_status_codes = frozenset(codes)
        return self

    def accepts(self, status_code: int) -> bool:
        return status_code in self.accepted_status_codes
