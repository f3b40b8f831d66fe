"""Tokenizer turning a single cron field into a tagged :data:`FieldExpr` value.

Each field text is scanned once; matching later dispatches on the resulting dataclass type
instead of re-testing the text for ``,``, ``/`` and ``-`` on every call.
"""

from __future__ import annotations

__all__ = [
    "FieldExpr",
    "FieldList",
    "LastDayOfMonth",
    "NearestWeekday",
    "Range",
    "Single",
    "Step",
    "Wildcard",
    "is_restricted",
    "parse_field",
]

from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
import re
from typing import Final, TypeAlias

from croncalc.common import MONTH_NAME_TO_INDEX, WEEKDAY_NAME_TO_INDEX, FieldPosition
from croncalc.errors import CronParseError

_INTEGER: Final = re.compile(r"\+?[0-9]+")

_NAMES_BY_POSITION: Final[Mapping[FieldPosition, Mapping[str, int]]] = {
    FieldPosition.Month: MONTH_NAME_TO_INDEX,
    FieldPosition.Weekday: WEEKDAY_NAME_TO_INDEX,
}


@dataclass(frozen=True, slots=True)
class Wildcard:
    """``*`` or ``?``; the latter defers to the other day field."""

    unconstrained: bool = False


@dataclass(frozen=True, slots=True)
class Single:
    """Exact value; ``None`` marks an unparseable token which never matches."""

    value: int | None


@dataclass(frozen=True, slots=True)
class Range:
    """Inclusive ``start-end`` range."""

    start: int
    end: int


@dataclass(frozen=True, slots=True)
class Step:
    """``base/increment``.

    ``start`` is ``None`` for a ``*`` base, meaning the field minimum. ``end`` is ``None`` when the
    base is not a range, in which case only the field's own domain bounds the values.
    """

    start: int | None
    end: int | None
    increment: int


@dataclass(frozen=True, slots=True)
class FieldList:
    """Comma-separated terms; a value matches when any term matches."""

    terms: tuple[FieldExpr, ...]


@dataclass(frozen=True, slots=True)
class LastDayOfMonth:
    """``L`` in the day-of-month field."""


@dataclass(frozen=True, slots=True)
class NearestWeekday:
    """``W`` suffix in the day-of-month field, matched as the plain day it wraps."""

    day: FieldExpr


FieldExpr: TypeAlias = Wildcard | Single | Range | Step | FieldList | LastDayOfMonth | NearestWeekday


def is_restricted(expr: FieldExpr) -> bool:
    """Return ``True`` unless *expr* is ``*`` or ``?``."""
    return not isinstance(expr, Wildcard)


@lru_cache(maxsize=1024)
def parse_field(text: str, position: FieldPosition = FieldPosition.Second) -> FieldExpr:
    """Parse the text of one field into a :data:`FieldExpr`.

    Month and weekday names are accepted in their own positions, case-insensitively. The
    ``L`` and ``W`` forms are recognised for the day-of-month position only.

    :param text: Field text without surrounding whitespace.
    :param position: Position of the field inside a normalized expression.
    :raises CronParseError: If a step or range is malformed.
    """
    names = _NAMES_BY_POSITION.get(position, {})
    if position is FieldPosition.Day:
        if text == "L":
            return LastDayOfMonth()
        if text.endswith("W"):
            return NearestWeekday(_parse(text.replace("W", ""), names))
    return _parse(text, names)


def _parse(text: str, names: Mapping[str, int]) -> FieldExpr:
    if text in ("*", "?"):
        return Wildcard(unconstrained=text == "?")

    if "," in text:
        parts = text.split(",")
        while parts and not parts[-1]:
            parts.pop()
        return FieldList(tuple(_parse(part.strip(), names) for part in parts))

    if "/" in text:
        return _parse_step(text, names)

    if "-" in text:
        start, end = _split_range(text, names)
        return Range(start, end)

    return Single(_to_int(text, names))


def _parse_step(text: str, names: Mapping[str, int]) -> Step:
    base, _, increment_text = text.partition("/")
    increment = _to_int(increment_text, {})
    if increment is None:
        raise CronParseError(text, "step must be an integer")
    if increment < 1:
        raise CronParseError(text, "step must be positive")

    if "-" in base:
        start, end = _split_range(base, names)
        return Step(start, end, increment)
    if base == "*":
        return Step(None, None, increment)

    start = _to_int(base, names)
    if start is None:
        raise CronParseError(text, f"step base {base!r} is not a number")
    return Step(start, None, increment)


def _split_range(text: str, names: Mapping[str, int]) -> tuple[int, int]:
    parts = text.split("-")
    if len(parts) != 2:  # noqa: PLR2004
        raise CronParseError(text, "range must have exactly two ends")
    start, end = (_to_int(part, names) for part in parts)
    if start is None or end is None:
        raise CronParseError(text, "range ends must be numbers")
    return start, end


def _to_int(token: str, names: Mapping[str, int]) -> int | None:
    """Return the integer *token* denotes, or ``None`` when it is neither a number nor a name."""
    if _INTEGER.fullmatch(token):
        return int(token)
    return names.get(token.upper())
