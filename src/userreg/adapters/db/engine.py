"""Engine factory for the user store.

`SqlAlchemyUserDao` opens a short transaction per call, and two DAOs (or a DAO
and an Alembic run) may point at the same SQLite file. SQLite files are
therefore switched to write-ahead logging so readers are not blocked by a
writer's open transaction. Other backends are used as configured.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


def is_sqlite(url: str | URL) -> bool:
    """Return True if the URL's backend is SQLite, whatever the driver."""
    return make_url(str(url)).get_backend_name() == "sqlite"


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create a SQLAlchemy Engine for the user store at ``url``.

    SQLite connections run ``journal_mode=WAL`` with ``synchronous=NORMAL``,
    the durability level SQLite recommends for WAL.
    """
    engine = create_engine(url, echo=echo)

    if is_sqlite(url):

        @event.listens_for(engine, "connect")
        def _sqlite_wal(dbapi_conn: SQLiteConnection, conn_record):  # type: ignore #pylint: disable=W0613
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA journal_mode=WAL;")
            cur.execute("PRAGMA synchronous=NORMAL;")
            cur.close()

    logger.debug("Created engine for %s", engine.url.render_as_string())
    return engine
