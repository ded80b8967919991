import dataclasses

import pytest
from pydantic import BaseModel

from atelier_validator.engine import build_validator
from atelier_validator.integration import (
    TypeValidatorRegistry,
    ValidationConfig,
    ValidationGateway,
)
from atelier_validator.primitives.exceptions import (
    ValidationFailedError,
    ValidatorNotFoundError,
)
from atelier_validator.rules import numeric, strings
from atelier_validator.validation import SUCCESS, ErrorCode, Failure

# --- Test Models ---


class CreateUser(BaseModel):
    name: str
    age: int


@dataclasses.dataclass
class Tag:
    label: str


def _registry() -> TypeValidatorRegistry:
    registry = TypeValidatorRegistry()

    def user_rules(v) -> None:
        v.field("name", strings.not_blank(), strings.min_length(2))
        v.field("age", numeric.min_value(18))

    registry.register(CreateUser, build_validator(CreateUser, user_rules))
    return registry


# --- Validation ---


def test_validate_collects_all_errors_by_default() -> None:
    gateway = ValidationGateway(_registry())

    result = gateway.validate(CreateUser(name="", age=3))

    assert isinstance(result, Failure)
    assert [e.code for e in result.errors] == [
        ErrorCode.NOT_BLANK,
        ErrorCode.TOO_SHORT,
        ErrorCode.OUT_OF_RANGE,
    ]


def test_fail_fast_returns_first_error() -> None:
    gateway = ValidationGateway(_registry(), ValidationConfig(fail_fast=True))

    result = gateway.validate(CreateUser(name="", age=3))

    assert isinstance(result, Failure)
    assert result.error_count == 1
    assert result.errors[0].code is ErrorCode.NOT_BLANK


def test_unregistered_type_raises_when_validator_required() -> None:
    gateway = ValidationGateway(_registry())

    with pytest.raises(ValidatorNotFoundError):
        gateway.validate(Tag("x"))


def test_unregistered_type_passes_when_validator_optional() -> None:
    gateway = ValidationGateway(_registry(), ValidationConfig(require_validator=False))

    assert gateway.validate(Tag("x")) is SUCCESS


def test_check_configuration_delegates_to_registry() -> None:
    ValidationGateway(_registry()).check_configuration()


# --- Parsing ---


def test_parse_and_validate_returns_valid_model() -> None:
    gateway = ValidationGateway(_registry())

    user = gateway.parse_and_validate(CreateUser, {"name": "Alice", "age": 30})

    assert user == CreateUser(name="Alice", age=30)


def test_parse_and_validate_raises_on_rule_failure() -> None:
    gateway = ValidationGateway(_registry())

    with pytest.raises(ValidationFailedError) as exc_info:
        gateway.parse_and_validate(CreateUser, {"name": "Alice", "age": 12})

    assert exc_info.value.result.errors[0].field_name == "age"


def test_parse_reports_pydantic_errors_as_failure() -> None:
    gateway = ValidationGateway(_registry())

    with pytest.raises(ValidationFailedError) as exc_info:
        gateway.parse(CreateUser, {"name": "Alice", "age": "old"})

    detail = exc_info.value.result.first_error_for("age")
    assert detail is not None
    assert detail.code is ErrorCode.INVALID_FORMAT
    assert detail.actual_value == "old"


def test_parse_plain_class_uses_keyword_arguments() -> None:
    gateway = ValidationGateway(_registry(), ValidationConfig(require_validator=False))

    assert gateway.parse(Tag, {"label": "news"}) == Tag("news")
    assert gateway.parse_and_validate(Tag, {"label": ""}) == Tag("")


# --- Batches ---


def test_validate_batch_splits_valid_and_invalid() -> None:
    gateway = ValidationGateway(_registry())
    good = CreateUser(name="Alice", age=30)
    bad = CreateUser(name="B", age=40)

    valid, invalid = gateway.validate_batch([good, bad, good])

    assert valid == [good, good]
    assert len(invalid) == 1
    obj, failure = invalid[0]
    assert obj is bad
    assert failure.errors[0].code is ErrorCode.TOO_SHORT


# --- Reporting ---


def test_error_response_uses_config() -> None:
    gateway = ValidationGateway(_registry())
    failure = gateway.validate(CreateUser(name="", age=30))
    assert isinstance(failure, Failure)

    status, body = gateway.error_response(failure)

    assert status == 400
    assert body["message"] == "Request validation failed: 2 error(s) detected"
    assert body["errors"][0] == {
        "field": "name",
        "message": "Cannot be blank",
        "code": "NOT_BLANK",
        "value": "",
    }


def test_custom_error_response_builder() -> None:
    config = ValidationConfig(
        error_status_code=422,
        error_response_builder=lambda failure: {"count": failure.error_count},
    )
    gateway = ValidationGateway(_registry(), config)
    failure = gateway.validate(CreateUser(name="Alice", age=1))
    assert isinstance(failure, Failure)

    assert gateway.error_response(failure) == (422, {"count": 1})
