"""Configuration for polycal.

The engine itself never reads the environment: callers build an
`EngineConfig` (usually via `load_config` in the CLI) and pass it in.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .core.errors import ConfigError

ENV_MAX_SEARCH_STEPS = "POLYCAL_MAX_SEARCH_STEPS"
ENV_WEEK_STARTS_ON = "POLYCAL_WEEK_STARTS_ON"
ENV_LOG_LEVEL = "POLYCAL_LOG_LEVEL"


def check_week_start(week_starts_on: int) -> int:
    """Return `week_starts_on` if it names a weekday (0 = Sunday ... 6 = Saturday)."""
    if isinstance(week_starts_on, bool) or not isinstance(week_starts_on, int) or not 0 <= week_starts_on <= 6:
        raise ConfigError(f"week_starts_on must be in 0..6, got {week_starts_on!r}")
    return week_starts_on


@dataclass(frozen=True)
class EngineConfig:
    """Tunable engine settings.

    Attributes:
        max_search_steps: Hard cap on iterations of every bounded search
            (lunisolar year/month searches, astronomical root finding).
        week_starts_on: First day of the Gregorian week used by week labels,
            0 = Sunday ... 6 = Saturday.
        log_level: Name of the console log level used by the CLI.
    """

    max_search_steps: int = 64
    week_starts_on: int = 0
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.max_search_steps < 0:
            raise ConfigError(f"max_search_steps must be >= 0, got {self.max_search_steps}")
        check_week_start(self.week_starts_on)
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError(f"unknown log level {self.log_level!r}")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())


DEFAULT_CONFIG = EngineConfig()


def _int_from_env(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from None


def load_config(environ: Optional[Mapping[str, str]] = None) -> EngineConfig:
    """Build an `EngineConfig` from environment variables.

    Args:
        environ: Mapping to read from. Defaults to `os.environ`; pass a dict in
            tests.

    Returns:
        The configuration, with defaults for unset variables.

    Raises:
        ConfigError: If a variable is set to an invalid value.
    """
    env = os.environ if environ is None else environ
    return EngineConfig(
        max_search_steps=_int_from_env(env, ENV_MAX_SEARCH_STEPS, DEFAULT_CONFIG.max_search_steps),
        week_starts_on=_int_from_env(env, ENV_WEEK_STARTS_ON, DEFAULT_CONFIG.week_starts_on),
        log_level=env.get(ENV_LOG_LEVEL, "").strip() or DEFAULT_CONFIG.log_level,
    )
