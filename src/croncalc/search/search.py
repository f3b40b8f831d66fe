"""Next-occurrence search over a calendar cursor.

The cursor starts just after the requested instant and moves forward by the coarsest unit that is
still unsatisfied (minute, hour, day), falling back to single seconds. Two hard limits guarantee
termination for schedules that can never fire: an iteration cap and a lookahead horizon.
"""

from __future__ import annotations

__all__ = [
    "LOOKAHEAD_YEARS",
    "MAX_ITERATIONS",
    "OccurrenceSearch",
    "find_next",
    "first_cursor",
    "lookahead_horizon",
    "matches_all",
    "next_occurrences",
]

import calendar
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Final

from dateutil.relativedelta import relativedelta

from croncalc.common import FIELD_BOUNDS, Dialect, FieldPosition
from croncalc.logging import WithLogger
from croncalc.matching.matcher import canonical_weekday, day_matches, matches

if TYPE_CHECKING:
    from collections.abc import Iterator

    from croncalc.cron_types import Instant
    from croncalc.expression.expression import CronExpression

MAX_ITERATIONS: Final[int] = 366 * 24 * 60 * 60
LOOKAHEAD_YEARS: Final[int] = 2

_ONE_SECOND: Final = timedelta(seconds=1)
_ONE_MINUTE: Final = timedelta(minutes=1)
_ONE_HOUR: Final = timedelta(hours=1)
_ONE_DAY: Final = timedelta(days=1)

_SECOND = FIELD_BOUNDS[FieldPosition.Second]
_MINUTE = FIELD_BOUNDS[FieldPosition.Minute]
_HOUR = FIELD_BOUNDS[FieldPosition.Hour]
_YEAR = FIELD_BOUNDS[FieldPosition.Year]


def _resolution(dialect: Dialect) -> timedelta:
    """Return the gap between two consecutive candidate instants of *dialect*."""
    return _ONE_MINUTE if dialect is Dialect.CRONTAB else _ONE_SECOND


def first_cursor(instant: Instant, dialect: Dialect) -> Instant:
    """Return the first candidate strictly after *instant*.

    Crontab expressions cannot name seconds, so their candidates sit on whole minutes.
    """
    cursor = instant.replace(microsecond=0)
    if dialect is Dialect.CRONTAB:
        cursor = cursor.replace(second=0)
    return cursor + _resolution(dialect)


def lookahead_horizon(expression: CronExpression, cursor: Instant) -> Instant:
    """Return the latest instant the search may inspect when starting at *cursor*.

    A plain integer year extends the default horizon far enough to reach that year.
    """
    years = LOOKAHEAD_YEARS
    year_token = expression.year_token.strip()
    if year_token.isdigit():
        years = max(LOOKAHEAD_YEARS, int(year_token) - cursor.year + 1)
    return cursor + relativedelta(years=years)


def matches_all(expression: CronExpression, cursor: Instant) -> bool:
    """Return ``True`` when every field of *expression* accepts *cursor*."""
    return (
        matches(cursor.second, expression.second, *_SECOND)
        and matches(cursor.minute, expression.minute, *_MINUTE)
        and matches(cursor.hour, expression.hour, *_HOUR)
        and _day_matches(expression, cursor)
        and matches(cursor.year, expression.year, *_YEAR)
    )


def _day_matches(expression: CronExpression, cursor: Instant) -> bool:
    return day_matches(
        cursor.day,
        cursor.month,
        canonical_weekday(cursor),
        expression.day,
        expression.month,
        expression.weekday,
        expression.dialect,
        last_day=calendar.monthrange(cursor.year, cursor.month)[1],
    )


def find_next(expression: CronExpression, cursor: Instant) -> Instant | None:
    """Return the first instant at or after *cursor* accepted by *expression*.

    :returns: The matching instant, or ``None`` when none exists before the lookahead horizon
        or within :data:`MAX_ITERATIONS` steps.
    """
    max_time = lookahead_horizon(expression, cursor)
    for _ in range(MAX_ITERATIONS):
        if cursor > max_time:
            return None

        if matches_all(expression, cursor):
            return cursor

        if not matches(cursor.minute, expression.minute, *_MINUTE):
            cursor = cursor.replace(second=0) + _ONE_MINUTE
        elif not matches(cursor.hour, expression.hour, *_HOUR):
            cursor = cursor.replace(minute=0, second=0) + _ONE_HOUR
        elif not _day_matches(expression, cursor):
            cursor = cursor.replace(hour=0, minute=0, second=0) + _ONE_DAY
        else:
            cursor += _ONE_SECOND
    return None


class OccurrenceSearch(WithLogger):
    """Produce successive occurrences of one :class:`CronExpression`.

    The search keeps no state between calls; each call owns its cursor.
    """

    def __init__(self, expression: CronExpression) -> None:
        self.expression = expression

    def iter_occurrences(self, after: Instant) -> Iterator[Instant]:
        """Yield occurrences strictly after *after* in increasing order.

        The iterator stops once a search gives up, which is how schedules that never fire again
        (a past year, the 31st of February) end.
        """
        dialect = self.expression.dialect
        cursor = first_cursor(after, dialect)
        while True:
            found = find_next(self.expression, cursor)
            if found is None:
                self._logger.debug(
                    "No occurrence of %r found after %s", self.expression.raw, cursor.isoformat()
                )
                return
            yield found
            cursor = found + _resolution(dialect)

    def next_occurrences(self, count: int, after: Instant) -> list[Instant]:
        """Return up to *count* occurrences strictly after *after*.

        An unexpected failure part way through, such as stepping past :data:`datetime.max`, is
        logged and ends the search with the occurrences found so far.
        """
        result: list[Instant] = []
        if count < 1:
            return result
        try:
            for occurrence in self.iter_occurrences(after):
                result.append(occurrence)
                if len(result) >= count:
                    break
        except Exception:  # noqa: BLE001
            self._logger.exception(
                "Failed to compute occurrences of %r, returning %d found so far",
                self.expression.raw,
                len(result),
            )
        return result


def next_occurrences(
    expression: CronExpression, count: int, after: Instant | None = None
) -> list[Instant]:
    """Return up to *count* occurrences of *expression* strictly after *after* (default: now)."""
    if after is None:
        after = datetime.now()
    return OccurrenceSearch(expression).next_occurrences(count, after)
