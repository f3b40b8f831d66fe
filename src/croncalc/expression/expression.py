"""Immutable parsed representation of a cron expression."""

from __future__ import annotations

__all__ = ["CronExpression"]

from dataclasses import dataclass
from functools import lru_cache
from typing import Final

from croncalc.common import FIELD_NAMES, SCHEDULER_FIELD_COUNTS, Dialect, FieldPosition
from croncalc.errors import CronParseError
from croncalc.expression.dialect import detect_dialect, normalize, split_fields
from croncalc.expression.fields import FieldExpr, Wildcard, parse_field
from croncalc.matching.matcher import canonical_weekdays

_YEAR_INDEX: Final[int] = FIELD_NAMES.index(FieldPosition.Year)
_ANY_YEAR: Final = Wildcard()


@dataclass(frozen=True, slots=True)
class CronExpression:
    """A cron expression parsed once and reused across occurrence queries.

    ``tokens`` hold the normalized field texts in scheduler order (second first); ``fields`` hold
    their parsed form, with the weekday already converted to the canonical 1 = Sunday encoding.
    """

    raw: str
    dialect: Dialect
    tokens: tuple[str, ...]
    fields: tuple[FieldExpr, ...]

    @classmethod
    def parse(cls, raw: str, dialect: Dialect | None = None) -> CronExpression:
        """Build a :class:`CronExpression` from *raw*, detecting the dialect when omitted.

        Results are memoised per ``(raw, dialect)``.

        :raises CronParseError: If the normalized expression does not have 6 or 7 fields, or a
            field holds a malformed range or step.
        """
        return _parse_cached(raw, dialect or detect_dialect(raw))

    @property
    def has_year(self) -> bool:
        """Return ``True`` for a seven-field expression."""
        return len(self.tokens) > _YEAR_INDEX

    @property
    def normalized(self) -> str:
        """Return the normalized expression as a single string."""
        return " ".join(self.tokens)

    @property
    def second(self) -> FieldExpr:
        return self.fields[0]

    @property
    def minute(self) -> FieldExpr:
        return self.fields[1]

    @property
    def hour(self) -> FieldExpr:
        return self.fields[2]

    @property
    def day(self) -> FieldExpr:
        return self.fields[3]

    @property
    def month(self) -> FieldExpr:
        return self.fields[4]

    @property
    def weekday(self) -> FieldExpr:
        return self.fields[5]

    @property
    def year(self) -> FieldExpr:
        """Return the year field, a wildcard for six-field expressions."""
        return self.fields[_YEAR_INDEX] if self.has_year else _ANY_YEAR

    @property
    def year_token(self) -> str:
        return self.tokens[_YEAR_INDEX] if self.has_year else "*"


@lru_cache(maxsize=256)
def _parse_cached(raw: str, dialect: Dialect) -> CronExpression:
    tokens = tuple(split_fields(normalize(raw, dialect)))
    if len(tokens) not in SCHEDULER_FIELD_COUNTS:
        msg = f"expected 5 crontab or 6-7 scheduler fields, got {len(split_fields(raw))}"
        raise CronParseError(raw, msg)

    fields: list[FieldExpr] = []
    for position, token in zip(FIELD_NAMES, tokens):
        try:
            if position is FieldPosition.Weekday:
                fields.append(canonical_weekdays(token, dialect))
            else:
                fields.append(parse_field(token, position))
        except CronParseError as exc:
            msg = f"{position} field {token!r}: {exc.reason}"
            raise CronParseError(raw, msg) from exc
    return CronExpression(raw=raw, dialect=dialect, tokens=tokens, fields=tuple(fields))
