import dataclasses
import logging
import threading

import pytest

from atelier_validator.constraints import Constraint
from atelier_validator.engine import ValidationEngine, ValidatorBuilder, deduplicate
from atelier_validator.rules import numeric, strings
from atelier_validator.validation import (
    SUCCESS,
    ErrorCode,
    Failure,
    ValidationErrorDetail,
)


def _user_validator(user_type):
    builder = ValidatorBuilder(user_type)
    builder.field("name", strings.not_blank(), strings.min_length(2))
    builder.field("age", numeric.min_value(18), numeric.max_value(120))
    builder.field("email", strings.email())
    builder.field("confirm_password").is_equal_to(lambda u: u.password)
    return builder.build()


# --- Scenarios ---


def test_blank_name_reports_not_blank(user, user_type) -> None:
    validator = _user_validator(user_type)

    result = validator.validate(dataclasses.replace(user, name=""))

    assert isinstance(result, Failure)
    first = result.errors[0]
    assert first.field_name == "name"
    assert first.code is ErrorCode.NOT_BLANK
    assert first.message == "Cannot be blank"


def test_age_out_of_range_same_in_both_modes(user, user_type) -> None:
    validator = _user_validator(user_type)
    minor = dataclasses.replace(user, age=10)

    collected = validator.validate(minor)
    fail_fast = validator.validate_first(minor)

    assert isinstance(collected, Failure)
    assert collected.error_count == 1
    detail = collected.errors[0]
    assert detail.field_name == "age"
    assert detail.code is ErrorCode.OUT_OF_RANGE
    assert "18" in detail.message
    assert isinstance(fail_fast, Failure)
    assert fail_fast.errors == (detail,)


def test_two_invalid_fields_keep_registration_order(user, user_type) -> None:
    validator = _user_validator(user_type)
    bad = dataclasses.replace(user, name=" ", email="not-an-email")

    collected = validator.validate(bad)
    fail_fast = validator.validate_first(bad)

    assert isinstance(collected, Failure)
    assert [e.field_name for e in collected.errors] == ["name", "name", "email"]
    assert [e.code for e in collected.errors] == [
        ErrorCode.NOT_BLANK,
        ErrorCode.TOO_SHORT,
        ErrorCode.INVALID_EMAIL,
    ]
    assert isinstance(fail_fast, Failure)
    assert fail_fast.error_count == 1
    assert fail_fast.errors[0] == collected.errors[0]


def test_blank_name_and_minor_age_fail_in_field_order(user, user_type) -> None:
    builder = ValidatorBuilder(user_type)
    builder.field("name", strings.not_blank())
    builder.field("age", numeric.min_value(18), numeric.max_value(120))
    validator = builder.build()
    bad = dataclasses.replace(user, name="", age=10)

    collected = validator.validate(bad)
    fail_fast = validator.validate_first(bad)

    assert isinstance(collected, Failure)
    assert [e.field_name for e in collected.errors] == ["name", "age"]
    assert isinstance(fail_fast, Failure)
    assert [e.field_name for e in fail_fast.errors] == ["name"]


def test_password_confirmation_mismatch(user, user_type) -> None:
    validator = _user_validator(user_type)

    result = validator.validate(dataclasses.replace(user, confirm_password="other"))

    assert isinstance(result, Failure)
    detail = result.first_error_for("confirm_password")
    assert detail is not None
    assert detail.code is ErrorCode.CROSS_FIELD_ERROR
    assert detail.message == "Must match the expected value"


def test_valid_object_is_success_in_both_modes(user, user_type) -> None:
    validator = _user_validator(user_type)

    assert validator.validate(user) is SUCCESS
    assert validator.validate_first(user) is SUCCESS


# --- Properties ---


def test_empty_registry_always_succeeds(user, user_type) -> None:
    validator = ValidatorBuilder(user_type).build()

    assert validator.validate(user) is SUCCESS
    assert validator.validate_first(None) is SUCCESS


def test_duplicate_failures_are_collapsed(user, user_type) -> None:
    builder = ValidatorBuilder(user_type)
    builder.field("name", strings.not_blank(), strings.not_blank())
    builder.field("name", strings.not_blank())

    result = builder.build().validate(dataclasses.replace(user, name=""))

    assert isinstance(result, Failure)
    assert result.error_count == 1


def test_same_code_different_message_is_kept(user, user_type) -> None:
    builder = ValidatorBuilder(user_type)
    builder.field("age", numeric.min_value(18), numeric.min_value(21))

    result = builder.build().validate(dataclasses.replace(user, age=5))

    assert isinstance(result, Failure)
    assert [e.message for e in result.errors] == [
        "Must be at least 18",
        "Must be at least 21",
    ]


def test_cross_field_checks_run_after_all_field_constraints(user, user_type) -> None:
    builder = ValidatorBuilder(user_type)
    builder.field("confirm_password").is_equal_to(lambda u: u.password)
    builder.field("name", strings.not_blank())

    result = builder.build().validate(
        dataclasses.replace(user, name="", confirm_password="x")
    )

    assert isinstance(result, Failure)
    assert [e.field_name for e in result.errors] == ["name", "confirm_password"]


def test_validate_first_stops_evaluating(user, user_type) -> None:
    calls: list[str] = []

    def _tracking(label: str, outcome: bool) -> Constraint:
        def _predicate(value) -> bool:
            calls.append(label)
            return outcome

        return Constraint(hint=label, code=ErrorCode.CUSTOM_ERROR, predicate=_predicate)

    builder = ValidatorBuilder(user_type)
    builder.field("name", _tracking("a", True), _tracking("b", False))
    builder.field("age", _tracking("c", False))
    validator = builder.build()

    result = validator.validate_first(user)

    assert isinstance(result, Failure)
    assert result.errors[0].message == "b"
    assert calls == ["a", "b"]


def test_validate_first_matches_head_of_validate(user, user_type) -> None:
    validator = _user_validator(user_type)
    candidates = [
        user,
        dataclasses.replace(user, name=""),
        dataclasses.replace(user, age=200, email="x"),
        dataclasses.replace(user, confirm_password="nope"),
        dataclasses.replace(user, name=None, age=None, email=None),
    ]

    for candidate in candidates:
        full = validator.validate(candidate)
        first = validator.validate_first(candidate)
        if isinstance(full, Failure):
            assert isinstance(first, Failure)
            assert first.errors == (full.errors[0],)
        else:
            assert first is SUCCESS


def test_validation_does_not_mutate_object(user, user_type) -> None:
    validator = _user_validator(user_type)
    bad = dataclasses.replace(user, name="")
    before = dataclasses.asdict(bad)

    validator.validate(bad)
    validator.validate_first(bad)

    assert dataclasses.asdict(bad) == before


def test_results_are_deterministic(user, user_type) -> None:
    validator = _user_validator(user_type)
    bad = dataclasses.replace(user, name="", age=1, email="nope")

    assert validator.validate(bad) == validator.validate(bad)


def test_predicate_exception_propagates(user, user_type) -> None:
    builder = ValidatorBuilder(user_type)
    builder.field("name").custom(lambda v: v.missing_attribute)

    with pytest.raises(AttributeError):
        builder.build().validate(user)


def test_concurrent_validation_shares_one_validator(user, user_type) -> None:
    validator = _user_validator(user_type)
    bad = dataclasses.replace(user, name="")
    expected = validator.validate(bad)
    results = []

    def _run() -> None:
        for _ in range(50):
            results.append(validator.validate(bad))

    threads = [threading.Thread(target=_run) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 200
    assert all(r == expected for r in results)


def test_engine_logs_outcome(caplog, user, user_type) -> None:
    caplog.set_level(logging.DEBUG, logger="atelier_validator.engine.executor")
    validator = _user_validator(user_type)

    validator.validate(dataclasses.replace(user, name=""))

    assert "Validated User" in caplog.text


# --- deduplicate ---


def test_deduplicate_keeps_first_occurrence_order() -> None:
    a = ValidationErrorDetail("f", "m", ErrorCode.INVALID_VALUE, "1")
    a_again = ValidationErrorDetail("f", "m", ErrorCode.INVALID_VALUE, "2")
    b = ValidationErrorDetail("g", "m", ErrorCode.INVALID_VALUE, "1")

    assert deduplicate([a, b, a_again]) == [a, b]


def test_engine_can_run_on_snapshot_directly(user, user_type) -> None:
    validator = _user_validator(user_type)
    engine = ValidationEngine(validator.registry)

    assert engine.validate(user) is SUCCESS
