"""English descriptions of cron expressions.

The generator reads the normalized field texts directly and never raises: anything it does not
recognise is printed as written.
"""

from __future__ import annotations

__all__ = [
    "FAILED_MESSAGE",
    "INVALID_MESSAGE",
    "DescriptionBuilder",
    "describe",
    "describe_fields",
]

import re
from typing import TYPE_CHECKING, Final

from croncalc.common import (
    MONTH_NAME_TO_INDEX,
    MONTH_NAMES,
    SCHEDULER_FIELD_COUNTS,
    WEEKDAY_ABBREVIATIONS,
    WEEKDAY_NAME_TO_INDEX,
    Dialect,
)
from croncalc.expression.dialect import detect_dialect, normalize, split_fields
from croncalc.logging import WithLogger

if TYPE_CHECKING:
    from croncalc.cron_types import FieldText

INVALID_MESSAGE: Final[str] = "Invalid Cron expression"
FAILED_MESSAGE: Final[str] = "Failed to parse Cron expression"

_WEEKDAY_TOKEN: Final = re.compile(r"/?[0-9]+|[A-Za-z]+")
_WEEKDAYS_RANGE: Final[str] = "Mon-Fri"
_CRONTAB_FIELD_LABELS: Final[tuple[str, ...]] = ("Minute", "Hour", "Day", "Month", "Week")
_SCHEDULER_FIELD_LABELS: Final[tuple[str, ...]] = (
    "Second",
    "Minute",
    "Hour",
    "Day",
    "Month",
    "Week",
    "Year",
)


def _value(text: FieldText) -> str:
    if text == "*":
        return "every"
    if "/" in text:
        return f"every {text.split('/')[1]}"
    return text


def _padded(text: FieldText) -> str:
    """Like :func:`_value`, but zero-pad plain numbers (``5`` becomes ``05``)."""
    value = _value(text)
    if value.isdigit():
        return f"{int(value):02d}"
    return value


def _clock(*units: FieldText) -> str:
    """Render ``hour:minute:second`` style text; every unit after the first is zero-padded."""
    first, *rest = units
    return ":".join([_value(first), *(_padded(unit) for unit in rest)])


def _weekday_name(number: int, dialect: Dialect) -> str | None:
    if dialect is Dialect.CRONTAB:
        return WEEKDAY_ABBREVIATIONS[number % 7] if 0 <= number <= 7 else None  # noqa: PLR2004
    if 1 <= number <= 7:  # noqa: PLR2004
        return WEEKDAY_ABBREVIATIONS[number - 1]
    if number == 0:
        return WEEKDAY_ABBREVIATIONS[0]
    return None


def _describe_week(text: FieldText, dialect: Dialect) -> str:
    def replace(match: re.Match[str]) -> str:
        token = match.group(0)
        if token.startswith("/"):
            return token
        if token.isdigit():
            return _weekday_name(int(token), dialect) or token
        if token.upper() in WEEKDAY_NAME_TO_INDEX:
            return token.title()
        return token

    result = _WEEKDAY_TOKEN.sub(replace, text)
    if _WEEKDAYS_RANGE in result:
        return f"weekdays ({_WEEKDAYS_RANGE})"
    return result


def _describe_month(text: FieldText) -> str:
    if "/" in text:
        return f"every {text.split('/')[1]} months"
    if text.isdigit() and 1 <= int(text) <= len(MONTH_NAMES):
        return MONTH_NAMES[int(text) - 1]
    if text.upper() in MONTH_NAME_TO_INDEX:
        return MONTH_NAMES[MONTH_NAME_TO_INDEX[text.upper()] - 1]
    return text


class DescriptionBuilder(WithLogger):
    """Render a normalized expression as an English sentence."""

    def __init__(self, raw: str, dialect: Dialect | None = None) -> None:
        self.raw = raw
        self.dialect = dialect or detect_dialect(raw)

    def build(self) -> str:
        """Return the description, or a fixed message when *raw* cannot be described."""
        try:
            parts = split_fields(normalize(self.raw, self.dialect))
            if len(parts) < min(SCHEDULER_FIELD_COUNTS):
                return INVALID_MESSAGE
            return self._sentence(parts)
        except Exception:  # noqa: BLE001
            self._logger.exception("Failed to describe cron expression %r", self.raw)
            return FAILED_MESSAGE

    def _sentence(self, parts: list[str]) -> str:
        second, minute, hour, day, month, week = parts[:6]
        chunks = ["Executes ", self._time_of_day(second, minute, hour)]

        if day not in ("*", "?"):
            chunks.append(f" on day {day}")
        if week not in ("*", "?"):
            chunks.append(f" on {_describe_week(week, self.dialect)}")
        if month != "*":
            chunks.append(f" in {_describe_month(month)}")
        if len(parts) > 6 and parts[6] != "*":  # noqa: PLR2004
            chunks.append(f" in year {parts[6]}")
        return "".join(chunks)

    def _time_of_day(self, second: str, minute: str, hour: str) -> str:
        if self.dialect is Dialect.CRONTAB:
            if minute == "*" and hour == "*":
                return "every minute"
            if hour == "*":
                return f"every hour at minute {minute}"
            return f"at {_clock(hour, minute, '00')}"

        if second == "*" and minute == "*" and hour == "*":
            return "every second"
        if minute == "*" and hour == "*":
            return f"every minute at second {second}"
        if hour == "*":
            return f"every hour at {_clock(minute, second)}"
        return f"at {_clock(hour, minute, second)}"


def describe(raw: str, dialect: Dialect | None = None) -> str:
    """Return an English sentence describing *raw*; never raises."""
    return DescriptionBuilder(raw, dialect).build()


def describe_fields(raw: str, dialect: Dialect | None = None) -> dict[str, str]:
    """Return a field label to field text breakdown of *raw*.

    Labels follow the dialect as written: crontab lines have no ``Second`` or ``Year``. An
    expression with the wrong number of fields yields an empty mapping.
    """
    dialect = dialect or detect_dialect(raw)
    parts = split_fields(raw)
    if dialect is Dialect.CRONTAB:
        labels = _CRONTAB_FIELD_LABELS if len(parts) == len(_CRONTAB_FIELD_LABELS) else ()
    else:
        labels = _SCHEDULER_FIELD_LABELS if len(parts) in SCHEDULER_FIELD_COUNTS else ()
    return dict(zip(labels, parts))
