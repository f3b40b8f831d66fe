"""Field matching, weekday normalisation and the day-of-month/day-of-week combination."""

from __future__ import annotations

__all__ = [
    "canonical_weekday",
    "canonical_weekdays",
    "day_matches",
    "matches",
    "weekday_matches",
]

from functools import lru_cache
import re
from typing import TYPE_CHECKING, Final

from typing_extensions import assert_never

from croncalc.common import FIELD_BOUNDS, WEEKDAY_NAME_TO_INDEX, Dialect, FieldPosition
from croncalc.expression.fields import (
    FieldExpr,
    FieldList,
    LastDayOfMonth,
    NearestWeekday,
    Range,
    Single,
    Step,
    Wildcard,
    is_restricted,
    parse_field,
)

if TYPE_CHECKING:
    from datetime import datetime

    from croncalc.cron_types import FieldText, Weekday

_WEEKDAY_NAME: Final = re.compile("|".join(WEEKDAY_NAME_TO_INDEX), re.IGNORECASE)
_CRONTAB_SUNDAY_ALIAS: Final[int] = 7
_WEEKDAY_MAX: Final[int] = FIELD_BOUNDS[FieldPosition.Weekday].maximum


def matches(value: int, expr: FieldText | FieldExpr, minimum: int, maximum: int) -> bool:
    """Return ``True`` when *value* satisfies a single field expression.

    :param value: Calendar value of the field (second, hour, day, ...).
    :param expr: Field text or an already parsed :data:`FieldExpr`.
    :param minimum: Lowest value of the field domain; anchors ``*/n`` steps.
    :param maximum: Highest value of the field domain; bounds open-ended steps.
    :raises CronParseError: If *expr* is text containing a malformed step or range.
    """
    if isinstance(expr, str):
        expr = parse_field(expr)
    return _matches(value, expr, minimum, maximum)


def _matches(value: int, expr: FieldExpr, minimum: int, maximum: int) -> bool:  # noqa: PLR0911
    match expr:
        case Wildcard():
            return True
        case FieldList(terms=terms):
            for term in terms:
                if _matches(value, term, minimum, maximum):
                    return True
            return False
        case Step(start=start, end=end, increment=increment):
            first = minimum if start is None else start
            last = maximum if end is None else end
            return first <= value <= last and (value - first) % increment == 0
        case Range(start=start, end=end):
            return start <= value <= end
        case Single(value=expected):
            return value == expected
        case NearestWeekday(day=day):
            return _matches(value, day, minimum, maximum)
        case LastDayOfMonth():
            # Needs the month length, only day_matches knows it.
            return False
        case _:
            assert_never(expr)


def canonical_weekday(instant: datetime) -> Weekday:
    """Return the weekday of *instant* encoded as 1 = Sunday ... 7 = Saturday."""
    return instant.isoweekday() % 7 + 1


@lru_cache(maxsize=512)
def canonical_weekdays(text: FieldText, dialect: Dialect) -> FieldExpr:
    """Parse a weekday field written in *dialect* numbering into the canonical encoding.

    Named days use scheduler numbering, so a field with any name is never shifted. Plain crontab
    digits are zero-based (``0`` and ``7`` are Sunday) and move up by one; step increments are
    counts rather than weekdays and stay as written.
    """
    expr = parse_field(text, FieldPosition.Weekday)
    if dialect is Dialect.CRONTAB and not _WEEKDAY_NAME.search(text):
        return _shift_crontab(expr)
    return expr


def _shift_crontab(expr: FieldExpr) -> FieldExpr:
    match expr:
        case Single(value=None):
            return expr
        case Single(value=value):
            return Single(_shift_day(value))
        case Range(start=start, end=end) if end == _CRONTAB_SUNDAY_ALIAS:
            return FieldList((Range(start + 1, _WEEKDAY_MAX), Single(_shift_day(end))))
        case Range(start=start, end=end):
            return Range(start + 1, end + 1)
        case Step(start=int(start), end=None | 7 as end, increment=increment):
            # Stepping may land on the Sunday alias, which wraps to the front of the week.
            shifted = Step(start + 1, end, increment)
            if start <= _CRONTAB_SUNDAY_ALIAS and (_CRONTAB_SUNDAY_ALIAS - start) % increment == 0:
                return FieldList((shifted, Single(_shift_day(_CRONTAB_SUNDAY_ALIAS))))
            return shifted
        case Step(start=start, end=end, increment=increment):
            return Step(
                None if start is None else start + 1,
                None if end is None else end + 1,
                increment,
            )
        case FieldList(terms=terms):
            return FieldList(tuple(_shift_crontab(term) for term in terms))
        case Wildcard() | LastDayOfMonth() | NearestWeekday():
            return expr
        case _:
            assert_never(expr)


def _shift_day(value: int) -> int:
    return 1 if value == _CRONTAB_SUNDAY_ALIAS else value + 1


def weekday_matches(
    calendar_weekday: Weekday, expr: FieldText | FieldExpr, dialect: Dialect
) -> bool:
    """Return ``True`` when the canonical *calendar_weekday* satisfies a weekday field.

    Text is interpreted in *dialect* numbering; a parsed expression must already be canonical,
    as stored by :class:`~croncalc.expression.expression.CronExpression`.
    """
    if isinstance(expr, str):
        expr = canonical_weekdays(expr, dialect)
    return _matches(calendar_weekday, expr, 1, _WEEKDAY_MAX)


def day_matches(  # noqa: PLR0913
    day: int,
    month: int,
    weekday: Weekday,
    day_expr: FieldText | FieldExpr,
    month_expr: FieldText | FieldExpr,
    week_expr: FieldText | FieldExpr,
    dialect: Dialect,
    *,
    last_day: int,
) -> bool:
    """Combine the day-of-month, day-of-week and month fields for one calendar day.

    When both day fields are restricted (neither ``*`` nor ``?``) a day matches if either of them
    does, as in classic cron. Otherwise the restricted side alone decides. The month has to match
    in every case.

    :param day: Day of the month.
    :param month: Month number, 1-12.
    :param weekday: Canonical weekday, 1 = Sunday.
    :param day_expr: Day-of-month field.
    :param month_expr: Month field.
    :param week_expr: Day-of-week field; text is read in *dialect* numbering.
    :param dialect: Dialect the weekday text is written in.
    :param last_day: Number of days in the month, used by ``L``.
    """
    if isinstance(day_expr, str):
        day_expr = parse_field(day_expr, FieldPosition.Day)
    if isinstance(month_expr, str):
        month_expr = parse_field(month_expr, FieldPosition.Month)
    if isinstance(week_expr, str):
        week_expr = canonical_weekdays(week_expr, dialect)

    if isinstance(day_expr, LastDayOfMonth):
        day_match = day == last_day
    else:
        day_match = _matches(day, day_expr, *FIELD_BOUNDS[FieldPosition.Day])
    week_match = _matches(weekday, week_expr, 1, _WEEKDAY_MAX)

    if is_restricted(day_expr) and is_restricted(week_expr):
        combined = day_match or week_match
    else:
        combined = day_match and week_match
    return combined and _matches(month, month_expr, *FIELD_BOUNDS[FieldPosition.Month])
