"""Dialect detection and normalisation of raw cron strings."""

from __future__ import annotations

__all__ = ["detect_dialect", "normalize", "split_fields"]

from croncalc.common import CRONTAB_FIELD_COUNT, Dialect


def split_fields(text: str | None) -> list[str]:
    """Split *text* on runs of whitespace, ignoring leading and trailing blanks."""
    if text is None:
        return []
    return text.split()


def detect_dialect(raw: str | None) -> Dialect:
    """Infer the dialect of *raw* from its field count.

    Exactly five fields is a crontab line; anything else is treated as scheduler style and
    left for the validator to reject when the count is wrong.
    """
    if len(split_fields(raw)) == CRONTAB_FIELD_COUNT:
        return Dialect.CRONTAB
    return Dialect.SCHEDULER


def normalize(raw: str, dialect: Dialect) -> str:
    """Rewrite *raw* into the six-field scheduler layout.

    A five-field crontab line gets a literal ``0`` seconds field prepended. Any other input is
    returned unchanged, even when malformed, so later stages report a meaningful failure.
    """
    if dialect is Dialect.CRONTAB and len(split_fields(raw)) == CRONTAB_FIELD_COUNT:
        return f"0 {raw.strip()}"
    return raw
