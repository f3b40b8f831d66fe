"""Module containing croncalc-related errors."""

from __future__ import annotations


class CronError(Exception):
    """Base class for all croncalc-related errors."""


class CronParseError(CronError, ValueError):
    """Raised when a cron expression or one of its fields cannot be tokenized.

    Public entry points never let it escape; it is part of the lower-level parsing API.
    """

    def __init__(self, expression: str, reason: str) -> None:
        self.expression = expression
        self.reason = reason
        super().__init__(f"{expression!r} is not valid cron expression: {reason}")


class CronConfigError(CronError, ValueError):
    """Raised when a setting supplied through the environment cannot be coerced."""
