"""Settings for the croncalc engine and useful functionality to work with them."""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Any, TypedDict

from typing_extensions import NotRequired, Unpack

from croncalc.errors import CronConfigError

ENV_PREFIX = "CRONCALC"


class CronSettingsKwargs(TypedDict):
    """Kwargs accepted by :meth:`CronSettings.load`."""

    default_count: NotRequired[int]
    date_format: NotRequired[str]
    log_level: NotRequired[str]


@dataclasses.dataclass
class CronSettings:
    """Strongly typed configuration holder for the croncalc engine.

    Search limits (iteration cap, lookahead horizon) are policy constants of
    :mod:`croncalc.search.search` and intentionally not part of the settings.
    """

    default_count: int
    date_format: str
    log_level: str

    @classmethod
    def from_defaults(cls) -> dict[str, Any]:
        """Return the canonical default values for all settings fields."""
        return {
            "default_count": 5,
            "date_format": "%Y-%m-%d %H:%M:%S %a",
            "log_level": "WARNING",
        }

    @classmethod
    def load(cls, **settings: Unpack[CronSettingsKwargs]) -> CronSettings:
        """Load settings from keyword overrides, env vars, and defaults (in that order).

        :param settings: Keyword arguments that override both environment variables and defaults.
        :returns: A fully instantiated :class:`CronSettings` object.
        :raises CronConfigError: If an environment variable holds a value that cannot be coerced.
        """
        final_settings = cls.from_defaults()
        final_settings.update(cls.from_envs())
        final_settings.update(settings)
        return cls(**final_settings)

    def update(self, **settings: Unpack[CronSettingsKwargs]) -> None:
        """Apply keyword overrides directly to the instance."""
        for k, v in settings.items():
            if hasattr(self, k):
                setattr(self, k, v)

    def as_dict(self) -> dict[str, Any]:
        """Return specified settings as a plain dictionary for serialisation."""
        return dataclasses.asdict(self)

    @classmethod
    def from_envs(cls) -> dict[str, Any]:
        """Return settings overridden via ``CRONCALC_*`` environment variables."""
        coercers: dict[str, Any] = {
            "default_count": _to_positive_int,
            "log_level": _to_log_level,
        }

        to_return: dict[str, Any] = {}
        for field in dataclasses.fields(cls):
            env_var = f"{ENV_PREFIX}_{field.name.upper()}"
            if env_var not in os.environ:
                continue
            raw_value = os.environ[env_var]
            if field.name not in coercers:
                to_return[field.name] = raw_value
                continue

            try:
                to_return[field.name] = coercers[field.name](raw_value)
            except ValueError as exc:
                msg = f"{raw_value!r} is not a valid value for {field.name!r}"
                raise CronConfigError(msg) from exc
        return to_return


def _to_positive_int(value: str) -> int:
    result = int(value)
    if result < 1:
        msg = f"Must be a positive integer, got {value!r}"
        raise ValueError(msg)
    return result


def _to_log_level(value: str) -> str:
    upper = value.upper()
    if not isinstance(logging.getLevelName(upper), int):
        msg = f"Must be a logging level name, got {value!r}"
        raise ValueError(msg)
    return upper
