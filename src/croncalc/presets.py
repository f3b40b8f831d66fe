"""Common ready-made schedules for each dialect."""

from __future__ import annotations

__all__ = ["Preset", "find_preset", "presets"]

from typing import Final, NamedTuple

from croncalc.common import Dialect
from croncalc.expression.dialect import detect_dialect, split_fields


class Preset(NamedTuple):
    """A labelled cron expression."""

    label: str
    expression: str


_PRESETS: Final[dict[Dialect, tuple[Preset, ...]]] = {
    Dialect.SCHEDULER: (
        Preset("Every second", "* * * * * ?"),
        Preset("Every minute", "0 * * * * ?"),
        Preset("Every 5 minutes", "0 */5 * * * ?"),
        Preset("Every 15 minutes", "0 */15 * * * ?"),
        Preset("Every 30 minutes", "0 */30 * * * ?"),
        Preset("Every hour", "0 0 * * * ?"),
        Preset("Every 2 hours", "0 0 */2 * * ?"),
        Preset("Every day at noon", "0 0 12 * * ?"),
        Preset("Every day at midnight", "0 0 0 * * ?"),
        Preset("Every Monday at 9:00", "0 0 9 ? * MON"),
        Preset("Every weekday at 9:00", "0 0 9 ? * MON-FRI"),
        Preset("First day of every month", "0 0 0 1 * ?"),
        Preset("Last day of every month", "0 0 0 L * ?"),
    ),
    Dialect.CRONTAB: (
        Preset("Every minute", "* * * * *"),
        Preset("Every 5 minutes", "*/5 * * * *"),
        Preset("Every 15 minutes", "*/15 * * * *"),
        Preset("Every 30 minutes", "*/30 * * * *"),
        Preset("Every hour", "0 * * * *"),
        Preset("Every 2 hours", "0 */2 * * *"),
        Preset("Every day at noon", "0 12 * * *"),
        Preset("Every day at midnight", "0 0 * * *"),
        Preset("Every Monday at 9:00", "0 9 * * 1"),
        Preset("Every weekday at 9:00", "0 9 * * 1-5"),
        Preset("First day of every month", "0 0 1 * *"),
        # Crontab has no ``L``; days 28-31 is the usual approximation.
        Preset("Days 28-31 of every month", "0 0 28-31 * *"),
    ),
}


def presets(dialect: Dialect) -> tuple[Preset, ...]:
    """Return the presets available for *dialect*."""
    return _PRESETS[dialect]


def find_preset(expression: str) -> str | None:
    """Return the label of the preset equal to *expression*, ignoring extra whitespace."""
    wanted = split_fields(expression)
    for preset in _PRESETS[detect_dialect(expression)]:
        if split_fields(preset.expression) == wanted:
            return preset.label
    return None
