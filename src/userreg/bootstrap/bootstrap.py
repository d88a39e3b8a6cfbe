"""Wire a UserService to its UserDao collaborator."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from sqlalchemy.engine import make_url

from userreg import config
from userreg.adapters.db.engine import is_sqlite, make_engine
from userreg.adapters.db.metadata import metadata
from userreg.adapters.user_dao import InMemoryUserDao, SqlAlchemyUserDao
from userreg.interfaces.user_dao import UserDao
from userreg.logging import configure_logging
from userreg.service_layer import UserService

logger = logging.getLogger(__name__)

SQLITE_MEMORY_DATABASES = {None, "", ":memory:"}


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring."""

    user_service: UserService
    user_dao: UserDao


def is_sqlite_memory(url: str) -> bool:
    """Return True if ``url`` names a private in-memory SQLite database."""
    return is_sqlite(url) and make_url(url).database in SQLITE_MEMORY_DATABASES


def build_user_dao(db_url: str | None = None) -> UserDao:
    """Build the UserDao for the given URL.

    Falls back to `USERREG_DB_URL`; with neither set, an in-memory store is used.
    File and server databases must already be migrated to head. In-memory
    SQLite databases cannot be migrated from outside, so their tables are
    created here.
    """
    if db_url is None and os.environ.get(config.DB_URL_ENV):
        db_url = config.get_db_url()
    if db_url is None:
        logger.debug("No database URL configured; using in-memory user store")
        return InMemoryUserDao()

    engine = make_engine(db_url)
    if is_sqlite_memory(db_url):
        metadata.create_all(engine)
        logger.debug("Created tables on in-memory SQLite database")
    return SqlAlchemyUserDao(engine)


def bootstrap(
    db_url: str | None = None, *, configure_logs: bool = False
) -> AppContainer:
    """Build a UserService with an injected UserDao.

    Args:
        db_url: Database URL for the user store (see `build_user_dao`).
        configure_logs: Attach the console handler at `USERREG_LOG_LEVEL`, with
            per-logger overrides from `USERREG_LOGGER_LEVELS`.
    """
    if configure_logs:
        configure_logging(
            config.get_log_level(), logger_levels=config.get_logger_levels()
        )
    user_dao = build_user_dao(db_url)
    return AppContainer(user_service=UserService(user_dao), user_dao=user_dao)
