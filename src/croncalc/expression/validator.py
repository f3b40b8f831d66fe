"""Cheap syntactic validation of raw cron strings.

Validation only sieves the structure: field count per dialect and the character class of each
field. Values outside a field's domain pass here and simply never match during search.
"""

from __future__ import annotations

__all__ = ["check_expression", "is_valid"]

import re
from typing import Final

from croncalc.common import CRONTAB_FIELD_COUNT, SCHEDULER_FIELD_COUNTS, Dialect
from croncalc.errors import CronParseError
from croncalc.expression.dialect import detect_dialect, split_fields

FIELD_PATTERN: Final = re.compile(r"[0-9*?/,\-LW#A-Za-z]+")


def check_expression(raw: str | None, dialect: Dialect | None = None) -> CronParseError | None:
    """Return the first structural problem of *raw*, or ``None`` when it is well-formed.

    The error is returned rather than raised so callers can decide whether it is fatal.

    :param raw: Raw expression as typed by the user.
    :param dialect: Dialect to validate against; detected from *raw* when omitted.
    """
    if raw is None or not raw.strip():
        return CronParseError(str(raw), "expression is empty")

    dialect = dialect or detect_dialect(raw)
    parts = split_fields(raw)
    if dialect is Dialect.CRONTAB:
        if len(parts) != CRONTAB_FIELD_COUNT:
            return CronParseError(raw, f"crontab expects 5 fields, got {len(parts)}")
    elif len(parts) not in SCHEDULER_FIELD_COUNTS:
        return CronParseError(raw, f"scheduler expects 6 or 7 fields, got {len(parts)}")

    for part in parts:
        if not FIELD_PATTERN.fullmatch(part):
            return CronParseError(raw, f"field {part!r} contains illegal characters")
    return None


def is_valid(raw: str | None, dialect: Dialect | None = None) -> bool:
    """Return ``True`` when *raw* passes :func:`check_expression`."""
    return check_expression(raw, dialect) is None
