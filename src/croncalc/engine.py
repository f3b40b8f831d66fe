"""Public entry points of the cron engine.

:class:`CronEngine` binds the loaded :class:`~croncalc.settings.CronSettings` to the pure
functions of the expression, search and description modules and converts every failure into the
advisory outcome callers expect: ``False``, an empty list or a fixed message. Module-level
functions that need settings use an engine loaded from the environment, falling back to the
defaults when the environment is invalid; the others call the pure functions directly.
"""

from __future__ import annotations

__all__ = [
    "CronEngine",
    "describe",
    "describe_fields",
    "detect_dialect",
    "format_instant",
    "is_valid",
    "next_occurrences",
]

from datetime import datetime
from typing import TYPE_CHECKING

from croncalc.description import description
from croncalc.errors import CronConfigError, CronParseError
from croncalc.expression import dialect as dialect_module
from croncalc.expression import validator
from croncalc.expression.expression import CronExpression
from croncalc.logging import WithLogger, configure_logging
from croncalc.search.search import OccurrenceSearch
from croncalc.settings import CronSettings

if TYPE_CHECKING:
    from typing_extensions import Unpack

    from croncalc.common import Dialect
    from croncalc.cron_types import Instant
    from croncalc.settings import CronSettingsKwargs


class CronEngine(WithLogger):
    """Container holding settings for the cron engine operations.

    Every public method is total: malformed expressions and unexpected internal errors never
    propagate to the caller.
    """

    def __init__(
        self, settings: CronSettings | None = None, **overrides: Unpack[CronSettingsKwargs]
    ) -> None:
        """Load :class:`~croncalc.settings.CronSettings`.

        :param settings: Ready settings to use as is; loaded from the environment when omitted.
        :param overrides: Keyword overrides applied on top of the settings.
        :raises CronConfigError: If *settings* is omitted and the environment holds an invalid
            setting.
        """
        if settings is None:
            settings = CronSettings.load(**overrides)
        else:
            settings.update(**overrides)
        self._settings = settings

    @property
    def settings(self) -> CronSettings:
        return self._settings

    def detect_dialect(self, raw: str | None) -> Dialect:
        """Return the dialect *raw* is written in."""
        return dialect_module.detect_dialect(raw)

    def is_valid(self, raw: str | None, dialect: Dialect | None = None) -> bool:
        """Return ``True`` when *raw* is structurally valid for *dialect*."""
        error = validator.check_expression(raw, dialect)
        if error is not None:
            self._logger.debug("Rejected cron expression: %s", error)
        return error is None

    def describe(self, raw: str, dialect: Dialect | None = None) -> str:
        """Return an English description of *raw*."""
        return description.describe(raw, dialect)

    def describe_fields(self, raw: str, dialect: Dialect | None = None) -> dict[str, str]:
        """Return the field breakdown of *raw*."""
        return description.describe_fields(raw, dialect)

    def parse(self, raw: str | CronExpression, dialect: Dialect | None = None) -> CronExpression:
        """Return *raw* as a :class:`CronExpression`.

        :raises CronParseError: If *raw* is not structurally parseable.
        """
        if isinstance(raw, CronExpression):
            return raw
        return CronExpression.parse(raw, dialect)

    def next_occurrences(
        self,
        raw: str | CronExpression,
        count: int | None = None,
        from_: Instant | None = None,
        dialect: Dialect | None = None,
    ) -> list[Instant]:
        """Return up to *count* instants after *from_* at which *raw* fires.

        Fewer results than requested means the schedule does not fire again within the lookahead
        horizon; an unparseable expression yields an empty list.

        :param raw: Expression text or an already parsed :class:`CronExpression`.
        :param count: Number of occurrences wanted; defaults to ``settings.default_count``.
        :param from_: Instant to search after; defaults to the current local time.
        :param dialect: Dialect of *raw*; detected when omitted.
        """
        count = self._settings.default_count if count is None else count
        from_ = datetime.now() if from_ is None else from_

        try:
            expression = self.parse(raw, dialect)
        except CronParseError as exc:
            self._logger.debug("Cannot compute occurrences: %s", exc)
            return []

        return OccurrenceSearch(expression).next_occurrences(count, from_)

    def format_instant(self, instant: Instant, fmt: str | None = None) -> str:
        """Render *instant* with *fmt*, defaulting to ``settings.date_format``."""
        return instant.strftime(fmt or self._settings.date_format)

    def configure_logging(self) -> None:
        """Install a root log handler at ``settings.log_level``."""
        configure_logging(level=self._settings.log_level)


def _default_engine() -> CronEngine:
    """Return an engine configured from the environment, or from defaults if that is invalid."""
    try:
        return CronEngine()
    except CronConfigError:
        CronEngine._get_logger().exception(  # noqa: SLF001
            "Invalid croncalc settings in the environment, using defaults"
        )
        return CronEngine(CronSettings(**CronSettings.from_defaults()))


def detect_dialect(raw: str | None) -> Dialect:
    """Return the dialect *raw* is written in."""
    return dialect_module.detect_dialect(raw)


def is_valid(raw: str | None, dialect: Dialect | None = None) -> bool:
    """Return ``True`` when *raw* is structurally valid for *dialect*."""
    return validator.is_valid(raw, dialect)


def describe(raw: str, dialect: Dialect | None = None) -> str:
    """Return an English description of *raw*."""
    return description.describe(raw, dialect)


def describe_fields(raw: str, dialect: Dialect | None = None) -> dict[str, str]:
    """Return the field breakdown of *raw*."""
    return description.describe_fields(raw, dialect)


def next_occurrences(
    raw: str | CronExpression,
    count: int | None = None,
    from_: Instant | None = None,
    dialect: Dialect | None = None,
) -> list[Instant]:
    """Return up to *count* instants after *from_* at which *raw* fires."""
    return _default_engine().next_occurrences(raw, count, from_, dialect)


def format_instant(instant: Instant, fmt: str | None = None) -> str:
    """Render *instant* with *fmt*, defaulting to the configured date format."""
    return _default_engine().format_instant(instant, fmt)
