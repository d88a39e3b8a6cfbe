"""Configuration utilities for userreg.

Environment-driven settings and the Alembic configuration builder.
"""

import os
import sys
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

from userreg.logging import level_from_name, parse_logger_levels

DB_URL_ENV = "USERREG_DB_URL"  # pragma: no mutate
LOG_LEVEL_ENV = "USERREG_LOG_LEVEL"  # pragma: no mutate
LOGGER_LEVELS_ENV = "USERREG_LOGGER_LEVELS"  # pragma: no mutate
DEFAULT_LOG_LEVEL = "WARNING"

ALEMBIC_URL_KEY = "sqlalchemy.url"  # pragma: no mutate
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """Raised when the USERREG_DB_URL environment variable is not set."""


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `USERREG_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `USERREG_DB_URL` is not set.
    """
    if not (url := os.environ.get(DB_URL_ENV)):
        raise DatabaseUrlNotSetError
    return url


def get_log_level() -> int:
    """Get the console log level from `USERREG_LOG_LEVEL` (default WARNING).

    Raises:
        InvalidLogLevelError: If the variable names no logging level.
    """
    return level_from_name(os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL)


def get_logger_levels() -> dict[str, int]:
    """Get per-logger levels from `USERREG_LOGGER_LEVELS` (e.g. "sqlalchemy=INFO").

    Unset means the library defaults only.

    Raises:
        InvalidLogLevelError: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    return parse_logger_levels(os.environ.get(LOGGER_LEVELS_ENV, ""))


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Build an Alembic `Config` object for userreg's migrations.

    Sets only Alembic "main" options:
    - `sqlalchemy.url` → the database URL you pass
    - `script_location` → the packaged Alembic scripts

    Args:
        db_url: SQLAlchemy database URL (e.g., `sqlite:///users.db`). Can be
            `None` only where Alembic won't need to connect to the DB.
        stdout: Text stream Alembic writes status lines to.

    Returns:
        An `alembic.config.Config` pointing to the migration scripts.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    cfg.set_main_option(
        ALEMBIC_SCRIPT_LOCATION_KEY,
        str(files("userreg.adapters.db.alembic")),
    )
    return cfg
