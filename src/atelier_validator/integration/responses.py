"""Wire models for validation errors on either side of an HTTP boundary."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from ..primitives.exceptions import ClientValidationFailedError
    from ..validation.result import Failure, ValidationErrorDetail


class ValidationErrorDetailDto(BaseModel):
    """One failed rule, as serialised for clients."""

    model_config = ConfigDict(frozen=True)

    field: str
    message: str
    code: str
    value: str | None = None

    @classmethod
    def from_detail(cls, detail: ValidationErrorDetail) -> ValidationErrorDetailDto:
        return cls(
            field=detail.field_name,
            message=detail.message,
            code=detail.code.value,
            value=detail.actual_value,
        )


class ValidationErrorResponse(BaseModel):
    """Body of a rejected request.

    Usage::

        body = ValidationErrorResponse.from_failure(failure).model_dump()
    """

    model_config = ConfigDict(frozen=True)

    message: str
    errors: list[ValidationErrorDetailDto] = Field(default_factory=list)

    @classmethod
    def from_failure(cls, failure: Failure) -> ValidationErrorResponse:
        return cls(
            message=(
                f"Request validation failed: {failure.error_count} error(s) detected"
            ),
            errors=[ValidationErrorDetailDto.from_detail(d) for d in failure.errors],
        )

    def errors_for(self, field: str) -> list[ValidationErrorDetailDto]:
        return [error for error in self.errors if error.field == field]


# ── Client side ──────────────────────────────────────────────────


class ClientValidationErrorDetailDto(ValidationErrorDetailDto):
    """A failed rule on a response body, tagged with the request URL."""

    url: str | None = None

    @classmethod
    def from_detail(
        cls, detail: ValidationErrorDetail, url: str | None = None
    ) -> ClientValidationErrorDetailDto:
        return cls(
            field=detail.field_name,
            message=detail.message,
            code=detail.code.value,
            value=detail.actual_value,
            url=url,
        )


class ClientValidationErrorResponse(BaseModel):
    """Serialisable report of a response that failed validation.

    Usage::

        except ClientValidationFailedError as exc:
            report = ClientValidationErrorResponse.from_error(exc)
    """

    model_config = ConfigDict(frozen=True)

    message: str = "Response validation failed"
    errors: list[ClientValidationErrorDetailDto] = Field(default_factory=list)
    url: str | None = None
    status_code: int | None = None

    @classmethod
    def from_failure(
        cls,
        failure: Failure,
        url: str | None = None,
        status_code: int | None = None,
    ) -> ClientValidationErrorResponse:
        return cls(
            errors=[
                ClientValidationErrorDetailDto.from_detail(d, url)
                for d in failure.errors
            ],
            url=url,
            status_code=status_code,
        )

    @classmethod
    def from_error(
        cls, exc: ClientValidationFailedError
    ) -> ClientValidationErrorResponse:
        return cls.from_failure(exc.result, exc.url, exc.status_code)

    def errors_for(self, field: str) -> list[ClientValidationErrorDetailDto]:
        return [error for error in self.errors if error.field == field]
