"""Public interface for the croncalc cron-expression engine."""

from __future__ import annotations

from .common import Dialect
from .engine import (
    CronEngine,
    describe,
    describe_fields,
    detect_dialect,
    format_instant,
    is_valid,
    next_occurrences,
)
from .errors import CronConfigError, CronError, CronParseError
from .expression.expression import CronExpression
from .presets import Preset, find_preset, presets

__all__ = [
    "CronConfigError",
    "CronEngine",
    "CronError",
    "CronExpression",
    "CronParseError",
    "Dialect",
    "Preset",
    "describe",
    "describe_fields",
    "detect_dialect",
    "find_preset",
    "format_instant",
    "is_valid",
    "next_occurrences",
    "presets",
]
