from decimal import Decimal

import pytest

from atelier_validator.primitives.exceptions import ConfigurationError
from atelier_validator.rules import numeric
from atelier_validator.validation import ErrorCode


def _fails(constraint, value) -> bool:
    return constraint.evaluate(value, "field") is not None


def test_min_and_max_value() -> None:
    assert _fails(numeric.min_value(18), 17)
    assert not _fails(numeric.min_value(18), 18)
    assert _fails(numeric.max_value(120), 121)
    assert not _fails(numeric.max_value(120), None)

    detail = numeric.min_value(18).evaluate(10, "age")
    assert detail is not None
    assert detail.code is ErrorCode.OUT_OF_RANGE
    assert detail.message == "Must be at least 18"
    assert detail.actual_value == "10"


def test_strict_and_inclusive_comparisons() -> None:
    assert _fails(numeric.greater_than(0), 0)
    assert not _fails(numeric.greater_than_or_equal(0), 0)
    assert _fails(numeric.less_than(10), 10)
    assert not _fails(numeric.less_than_or_equal(10), 10)


def test_in_range_is_inclusive() -> None:
    rule = numeric.in_range(1, 5)

    assert not _fails(rule, 1)
    assert not _fails(rule, 5)
    assert _fails(rule, 6)
    detail = rule.evaluate(0, "qty")
    assert detail is not None
    assert detail.message == "Must be between 1 and 5 (inclusive)"


def test_between_is_exclusive() -> None:
    rule = numeric.between(1, 5)

    assert _fails(rule, 1)
    assert not _fails(rule, 3)
    assert _fails(rule, 5)


def test_bounds_work_with_decimals_and_floats() -> None:
    assert _fails(numeric.min_value(Decimal("0.50")), Decimal("0.49"))
    assert not _fails(numeric.max_value(1.5), 1.5)


def test_nan_fails_ordered_comparisons() -> None:
    nan = float("nan")

    assert _fails(numeric.min_value(0), nan)
    assert _fails(numeric.max_value(0), nan)
    assert _fails(numeric.in_range(0, 1), nan)


def test_sign_and_zero_rules() -> None:
    assert _fails(numeric.positive(), 0)
    assert not _fails(numeric.positive(), 0.1)
    assert _fails(numeric.negative(), 0)
    assert not _fails(numeric.negative(), -3)
    assert not _fails(numeric.is_zero(), 0)
    detail = numeric.is_zero().evaluate(1, "delta")
    assert detail is not None
    assert detail.code is ErrorCode.INVALID_VALUE


def test_multiple_of() -> None:
    assert not _fails(numeric.multiple_of(5), 25)
    assert _fails(numeric.multiple_of(5), 26)
    with pytest.raises(ConfigurationError, match="divisor"):
        numeric.multiple_of(0)


def test_inverted_bounds_are_rejected() -> None:
    with pytest.raises(ConfigurationError, match="min must be <= max"):
        numeric.in_range(5, 1)
    with pytest.raises(ConfigurationError, match="exclusive between"):
        numeric.between(3, 3)
