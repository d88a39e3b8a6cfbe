"""Logging helpers used by userreg.

Provides a Rich console handler, a filter that annotates third-party records
with a short prefix, and parsing of per-logger level overrides of the form
``NAME=LEVEL``.
"""

from __future__ import annotations

import logging
import re
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "userreg"

DEFAULT_LIB_LEVELS = {"sqlalchemy": logging.WARNING, "alembic": logging.WARNING}


class InvalidLogLevelError(ValueError):
    """Raised when a log level name or NAME=LEVEL item cannot be parsed.

    Attributes:
        value (str): The offending input.
    """

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"{reason}: {value!r}")
        self.value = value


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    Records from loggers outside the project get `record.prefix` set to a
    token like "[sqlalchemy]"; project records get an empty prefix. The
    filter never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "sqlalchemy.engine.Engine" -> "[sqlalchemy]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def level_from_name(name: str) -> int:
    """Convert a level name such as "info" into its numeric logging level.

    Raises:
        InvalidLogLevelError: If the name is not a standard level.
    """
    lvl = getattr(logging, name.strip().upper(), None)
    if not isinstance(lvl, int):
        raise InvalidLogLevelError(name, "Invalid log level")
    return lvl


def parse_logger_levels(value: str | list[str] | tuple[str, ...]) -> dict[str, int]:
    """Parse NAME=LEVEL overrides into a name->level dict.

    Items may be comma or whitespace separated, or given as a sequence.
    Overrides are layered over DEFAULT_LIB_LEVELS and later items win.

    Raises:
        InvalidLogLevelError: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    chunks = value if isinstance(value, (tuple, list)) else [value]
    items = [s for chunk in chunks for s in re.split(r"[,\s]+", chunk) if s]

    levels = dict(DEFAULT_LIB_LEVELS)
    for item in items:
        name, sep, level_str = item.partition("=")
        if not sep or not name:
            raise InvalidLogLevelError(item, "Expected NAME=LEVEL")
        levels[name.strip()] = level_from_name(level_str)
    return levels


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr. In debug mode the level is forced to DEBUG
    and file/line information is shown; otherwise third-party records are
    prefixed with their library name.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting (show_path, timestamps).
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to the root logger.
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

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def configure_logging(
    level: int = logging.WARNING,
    *,
    debug_mode: bool = False,
    color: bool = True,
    logger_levels: dict[str, int] | None = None,
) -> RichHandler:
    """Attach a console handler to the root logger and apply level overrides.

    Args:
        level: Console level (see `config_console_handler`).
        debug_mode: Enable debug formatting.
        color: Enable color output.
        logger_levels: Per-logger levels; defaults to DEFAULT_LIB_LEVELS.

    Returns:
        RichHandler: The handler that was attached.
    """
    handler = config_console_handler(level=level, debug_mode=debug_mode, color=color)
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(min(root.getEffectiveLevel(), handler.level))

    for name, lvl in (logger_levels or DEFAULT_LIB_LEVELS).items():
        logging.getLogger(name).setLevel(lvl)

    logging.getLogger(__name__).debug(
        "Console logging at %s", logging.getLevelName(handler.level)
    )
    return handler
