"""Tests for parsing whole cron expressions."""

from __future__ import annotations

import dataclasses

import pytest

from croncalc.common import Dialect
from croncalc.errors import CronParseError
from croncalc.expression.expression import CronExpression
from croncalc.expression.fields import FieldList, Range, Single, Step, Wildcard


def test_parse_scheduler_expression() -> None:
    """Six scheduler fields are kept in order and parsed."""
    expression = CronExpression.parse("0 30 9 ? * MON-FRI")

    assert expression.dialect is Dialect.SCHEDULER
    assert expression.tokens == ("0", "30", "9", "?", "*", "MON-FRI")
    assert expression.second == Single(0)
    assert expression.minute == Single(30)
    assert expression.hour == Single(9)
    assert expression.day == Wildcard(unconstrained=True)
    assert expression.month == Wildcard()
    assert expression.weekday == Range(2, 6)
    assert not expression.has_year
    assert expression.year == Wildcard()
    assert expression.year_token == "*"


def test_parse_crontab_expression_is_normalized() -> None:
    """A crontab line gains a zero seconds field and canonical weekdays."""
    expression = CronExpression.parse("  */15  9-17 * *   1-5 ")

    assert expression.dialect is Dialect.CRONTAB
    assert expression.normalized == "0 */15 9-17 * * 1-5"
    assert expression.minute == Step(None, None, 15)
    assert expression.weekday == Range(2, 6)


@pytest.mark.parametrize(
    ("raw", "weekday"),
    [
        pytest.param("0 9 * * 0", Single(1), id="zero-is-sunday"),
        pytest.param("0 9 * * 7", Single(1), id="seven-is-sunday"),
        pytest.param("0 9 * * 6", Single(7), id="saturday"),
        pytest.param("0 9 * * 5-7", FieldList((Range(6, 7), Single(1))), id="range-to-sunday"),
        pytest.param("0 9 * * SUN", Single(1), id="name"),
    ],
)
def test_crontab_weekday_is_canonical(raw: str, weekday: object) -> None:
    """Crontab weekday digits are stored in the 1 = Sunday encoding."""
    assert CronExpression.parse(raw).weekday == weekday


def test_year_field() -> None:
    """A seventh field restricts the year."""
    expression = CronExpression.parse("0 0 12 1 1 ? 2030")

    assert expression.has_year
    assert expression.year == Single(2030)
    assert expression.year_token == "2030"


def test_explicit_dialect_overrides_detection() -> None:
    """The caller may force how a line is read."""
    expression = CronExpression.parse("0 0 9 ? * 1", Dialect.SCHEDULER)
    assert expression.weekday == Single(1)


@pytest.mark.parametrize(
    "raw",
    [
        pytest.param("", id="empty"),
        pytest.param("* * * *", id="four-fields"),
        pytest.param("0 0 0 1 1 ? 2030 extra", id="eight-fields"),
    ],
)
def test_parse_rejects_field_count(raw: str) -> None:
    """Only 5, 6 or 7 fields can be parsed."""
    with pytest.raises(CronParseError, match="fields"):
        CronExpression.parse(raw)


def test_parse_reports_malformed_field_position() -> None:
    """The failing field is named in the error."""
    with pytest.raises(CronParseError, match="Minute field '\\*/0'") as exc_info:
        CronExpression.parse("0 */0 * * * ?")
    assert exc_info.value.expression == "0 */0 * * * ?"
    assert isinstance(exc_info.value, ValueError)


def test_parse_is_memoised() -> None:
    """Parsing the same text twice returns the same instance."""
    assert CronExpression.parse("0 0 12 * * ?") is CronExpression.parse("0 0 12 * * ?")


def test_expression_is_immutable() -> None:
    """Parsed expressions cannot be modified."""
    expression = CronExpression.parse("0 0 12 * * ?")
    with pytest.raises(dataclasses.FrozenInstanceError):
        expression.raw = "* * * * * ?"  # type: ignore[misc]
