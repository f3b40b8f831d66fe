"""Tests for syntactic validation of cron expressions."""

from __future__ import annotations

import pytest

from croncalc.common import Dialect
from croncalc.errors import CronParseError
from croncalc.expression.validator import check_expression, is_valid


@pytest.mark.parametrize(
    "expression",
    [
        pytest.param("0 0 12 * * ?", id="daily-noon"),
        pytest.param("0 */5 * * * ?", id="every-5-minutes"),
        pytest.param("0 0 9 ? * MON-FRI", id="weekdays"),
        pytest.param("0 0 0 L * ?", id="last-day"),
        pytest.param("0 0 0 15W * ?", id="nearest-weekday"),
        pytest.param("0 0 8-18/2 * * ?", id="range-step"),
        pytest.param("0 0 12 ? * 6#3", id="nth-weekday"),
        pytest.param("0 0 12 1 1 ? 2099", id="with-year"),
        pytest.param("0 0 99 * * ?", id="out-of-domain-still-syntactic"),
    ],
)
def test_valid_scheduler_expressions(expression: str) -> None:
    """Well-formed scheduler expressions pass."""
    assert is_valid(expression, Dialect.SCHEDULER)
    assert check_expression(expression, Dialect.SCHEDULER) is None


@pytest.mark.parametrize(
    "expression",
    [
        pytest.param("* * * * *", id="every-minute"),
        pytest.param("*/5 * * * *", id="every-5-minutes"),
        pytest.param("0 9 * * 1-5", id="weekdays"),
        pytest.param("30 8 * * 0", id="sunday"),
        pytest.param("0 0 28-31 * *", id="month-end"),
    ],
)
def test_valid_crontab_expressions(expression: str) -> None:
    """Well-formed crontab lines pass."""
    assert is_valid(expression, Dialect.CRONTAB)


@pytest.mark.parametrize(
    "expression",
    [
        pytest.param("", id="empty"),
        pytest.param("   ", id="blank"),
        pytest.param("* * * *", id="four-fields"),
        pytest.param("* * * * *", id="crontab-line"),
        pytest.param("* * * * * * * *", id="eight-fields"),
        pytest.param("invalid", id="single-word"),
        pytest.param("0 0 12 * * $", id="illegal-character"),
    ],
)
def test_invalid_scheduler_expressions(expression: str) -> None:
    """Wrong arity or illegal characters are rejected for scheduler style."""
    assert not is_valid(expression, Dialect.SCHEDULER)


@pytest.mark.parametrize(
    "expression",
    [
        pytest.param("", id="empty"),
        pytest.param("* * * *", id="four-fields"),
        pytest.param("* * * * * *", id="scheduler-line"),
        pytest.param("invalid cron", id="two-words"),
        pytest.param("0 12 * * 1;2", id="illegal-character"),
    ],
)
def test_invalid_crontab_expressions(expression: str) -> None:
    """Wrong arity or illegal characters are rejected for crontab."""
    assert not is_valid(expression, Dialect.CRONTAB)


def test_auto_detected_dialect() -> None:
    """Without an explicit dialect the field count decides."""
    assert is_valid("0 0 12 * * ?")
    assert is_valid("0 12 * * *")
    assert not is_valid(None)
    assert not is_valid("")


def test_check_expression_returns_error_instead_of_raising() -> None:
    """The error value describes the first problem found."""
    error = check_expression("0 0 12 * * ? 2026 extra", Dialect.SCHEDULER)

    assert isinstance(error, CronParseError)
    assert "6 or 7 fields" in error.reason
    assert error.expression == "0 0 12 * * ? 2026 extra"

    error = check_expression("0 12 * * %", Dialect.CRONTAB)
    assert isinstance(error, CronParseError)
    assert "'%'" in error.reason
