"""Logging helpers shared across croncalc modules."""

from __future__ import annotations

__all__ = ["DEFAULT_LOG_FORMAT", "WithLogger", "configure_logging"]

import logging
from typing import ClassVar, Final

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class WithLogger:
    """Mixin providing a logger named after the concrete class.

    Loggers are cached per class, so every instance of the same class shares one logger.
    """

    _loggers: ClassVar[dict[type, logging.Logger]] = {}

    @classmethod
    def _get_logger(cls) -> logging.Logger:
        """Return the class-named logger, creating it on first access."""
        if cls not in WithLogger._loggers:
            WithLogger._loggers[cls] = logging.getLogger(cls.__name__)
        return WithLogger._loggers[cls]

    @property
    def _logger(self) -> logging.Logger:
        return self._get_logger()


def configure_logging(level: int | str = logging.INFO, fmt: str = DEFAULT_LOG_FORMAT) -> None:
    """Configure the root logger with a stream handler and *fmt* formatter.

    :param level: Numeric level or a level name such as ``"DEBUG"``.
    :param fmt: Format string applied to the installed handler.
    :raises ValueError: If *level* is a string which is not a known level name.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            msg = f"{level!r} is not a valid logging level name"
            raise ValueError(msg)
        level = resolved

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    root_logger.addHandler(handler)
