"""Some common constants and objects which may be used in any modules."""

from __future__ import annotations

import sys
from typing import Final, NamedTuple

if sys.version_info >= (3, 11):
    from enum import StrEnum
else:
    from backports.strenum import StrEnum

__all__ = [
    "CRONTAB_FIELD_COUNT",
    "FIELD_BOUNDS",
    "FIELD_NAMES",
    "MONTH_NAMES",
    "MONTH_NAME_TO_INDEX",
    "SCHEDULER_FIELD_COUNTS",
    "WEEKDAY_ABBREVIATIONS",
    "WEEKDAY_NAME_TO_INDEX",
    "Dialect",
    "FieldBounds",
    "FieldPosition",
]

CRONTAB_FIELD_COUNT: Final[int] = 5
SCHEDULER_FIELD_COUNTS: Final[tuple[int, ...]] = (6, 7)


class Dialect(StrEnum):
    """Enum of known cron dialects."""

    SCHEDULER = "SCHEDULER"
    """Second Minute Hour Day Month Week [Year]."""
    CRONTAB = "CRONTAB"
    """Minute Hour Day Month Week."""


class FieldPosition(StrEnum):
    """Enum of field positions inside a normalized expression."""

    Second = "Second"
    Minute = "Minute"
    Hour = "Hour"
    Day = "Day"
    Month = "Month"
    Weekday = "Weekday"
    Year = "Year"


FIELD_NAMES: Final[tuple[FieldPosition, ...]] = tuple(FieldPosition)


class FieldBounds(NamedTuple):
    """Inclusive domain of a single field."""

    minimum: int
    maximum: int


FIELD_BOUNDS: Final[dict[FieldPosition, FieldBounds]] = {
    FieldPosition.Second: FieldBounds(0, 59),
    FieldPosition.Minute: FieldBounds(0, 59),
    FieldPosition.Hour: FieldBounds(0, 23),
    FieldPosition.Day: FieldBounds(1, 31),
    FieldPosition.Month: FieldBounds(1, 12),
    FieldPosition.Weekday: FieldBounds(1, 7),
    FieldPosition.Year: FieldBounds(1970, 2099),
}

# Scheduler numbering, which is also the canonical one.
WEEKDAY_NAME_TO_INDEX: Final[dict[str, int]] = {
    "SUN": 1,
    "MON": 2,
    "TUE": 3,
    "WED": 4,
    "THU": 5,
    "FRI": 6,
    "SAT": 7,
}
WEEKDAY_ABBREVIATIONS: Final[tuple[str, ...]] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

MONTH_NAME_TO_INDEX: Final[dict[str, int]] = {
    "JAN": 1,
    "FEB": 2,
    "MAR": 3,
    "APR": 4,
    "MAY": 5,
    "JUN": 6,
    "JUL": 7,
    "AUG": 8,
    "SEP": 9,
    "OCT": 10,
    "NOV": 11,
    "DEC": 12,
}
MONTH_NAMES: Final[tuple[str, ...]] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
