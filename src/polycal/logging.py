"""Logging helpers used by the polycal CLI.

The library modules only create loggers with `logging.getLogger(__name__)`;
handlers are attached here, by the CLI, using Rich for console output.
"""

from __future__ import annotations

import logging
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "polycal"


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from non-polycal loggers with a short "[name]" prefix."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output (forced to DEBUG in debug_mode).
        debug_mode: Show logger names, timestamps and source paths.
        color: Enable color output when True.

    Returns:
        RichHandler: Handler suitable to attach to the root logger.
    """
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    fmt = "%(prefix)s %(message)s" if not debug_mode else "%(asctime)s %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))
    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def setup_logging(level: int = logging.WARNING, *, debug_mode: bool = False, color: bool = True) -> RichHandler:
    """Attach a console handler to the root logger, replacing earlier ones from here."""
    root = logging.getLogger()
    for h in list(root.handlers):
        if isinstance(h, RichHandler):
            root.removeHandler(h)
    handler = config_console_handler(level, debug_mode=debug_mode, color=color)
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug_mode else level)
    return handler
