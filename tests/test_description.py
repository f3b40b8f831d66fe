"""Tests for English descriptions and field breakdowns."""

from __future__ import annotations

import logging

import pytest

from croncalc.common import Dialect
from croncalc.description import describe, describe_fields
from croncalc.description.description import FAILED_MESSAGE, INVALID_MESSAGE, DescriptionBuilder


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        pytest.param("0 30 9 * * MON-FRI", "Executes at 9:30:00 on weekdays (Mon-Fri)", id="weekdays"),
        pytest.param("0 0 12 * * ?", "Executes at 12:00:00", id="daily-noon"),
        pytest.param("* * * * * ?", "Executes every second", id="every-second"),
        pytest.param("15 * * * * ?", "Executes every minute at second 15", id="every-minute"),
        pytest.param("0 5 * * * ?", "Executes every hour at 5:00", id="every-hour"),
        pytest.param("0 0 0 1 */3 ?", "Executes at 0:00:00 on day 1 in every 3 months", id="quarterly"),
        pytest.param(
            "0 0 12 1 1 ? 2030",
            "Executes at 12:00:00 on day 1 in January in year 2030",
            id="with-year",
        ),
        pytest.param("0 0 0 1 MAR ?", "Executes at 0:00:00 on day 1 in March", id="month-name"),
        pytest.param("0 0 9 ? * 2", "Executes at 9:00:00 on Mon", id="scheduler-weekday-number"),
        pytest.param("0 0 9 ? * SAT,SUN", "Executes at 9:00:00 on Sat,Sun", id="weekday-list"),
        pytest.param("0 0 0 L * ?", "Executes at 0:00:00 on day L", id="last-day"),
    ],
)
def test_describe_scheduler(raw: str, expected: str) -> None:
    """Scheduler expressions are rendered with second precision."""
    assert describe(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        pytest.param("* * * * *", "Executes every minute", id="every-minute"),
        pytest.param("5 * * * *", "Executes every hour at minute 5", id="every-hour"),
        pytest.param("0 12 * * *", "Executes at 12:00:00", id="daily-noon"),
        pytest.param("0 9 * * 1-5", "Executes at 9:00:00 on weekdays (Mon-Fri)", id="weekdays"),
        pytest.param("30 8 * * 0", "Executes at 8:30:00 on Sun", id="sunday-zero"),
        pytest.param("30 8 * * 7", "Executes at 8:30:00 on Sun", id="sunday-seven"),
        pytest.param("0 0 1 * *", "Executes at 0:00:00 on day 1", id="monthly"),
    ],
)
def test_describe_crontab(raw: str, expected: str) -> None:
    """Crontab lines are rendered with minute precision and zero-based weekdays."""
    assert describe(raw) == expected


def test_describe_uses_given_dialect() -> None:
    """Forcing the dialect changes how weekday numbers are named."""
    assert describe("0 0 9 ? * 1", Dialect.SCHEDULER) == "Executes at 9:00:00 on Sun"
    assert describe("0 0 9 ? * 1", Dialect.CRONTAB) == "Executes at 9:00:00 on Mon"


@pytest.mark.parametrize("raw", ["", "   ", "* * *", "0 0 12 *"])
def test_describe_too_few_fields(raw: str) -> None:
    """Expressions shorter than six normalized fields are rejected with a fixed message."""
    assert describe(raw) == INVALID_MESSAGE


def test_describe_never_raises(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    """Unexpected failures are logged and turned into a fixed message."""

    def explode(self: DescriptionBuilder, parts: list[str]) -> str:
        msg = "boom"
        raise RuntimeError(msg)

    monkeypatch.setattr(DescriptionBuilder, "_sentence", explode)
    with caplog.at_level(logging.ERROR, logger=DescriptionBuilder.__name__):
        assert describe("0 0 12 * * ?") == FAILED_MESSAGE
    assert "Failed to describe" in caplog.text


def test_describe_fields_crontab() -> None:
    """Crontab lines are broken down without seconds or year."""
    assert describe_fields("0 9 * * 1-5") == {
        "Minute": "0",
        "Hour": "9",
        "Day": "*",
        "Month": "*",
        "Week": "1-5",
    }


def test_describe_fields_scheduler_with_year() -> None:
    """Seven scheduler fields include the year."""
    assert describe_fields("0 0 12 1 1 ? 2030") == {
        "Second": "0",
        "Minute": "0",
        "Hour": "12",
        "Day": "1",
        "Month": "1",
        "Week": "?",
        "Year": "2030",
    }
    assert "Year" not in describe_fields("0 0 12 * * ?")


@pytest.mark.parametrize("raw", ["", "* * * *", "0 0 0 1 1 ? 2030 extra"])
def test_describe_fields_wrong_count(raw: str) -> None:
    """A wrong field count yields no breakdown."""
    assert describe_fields(raw) == {}
