"""Implementation of UserDao using SQLAlchemy."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select, update

from userreg.adapters.db.schema import users
from userreg.domain import User
from userreg.interfaces.user_dao import UserDao

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


class SqlAlchemyUserDao(UserDao):
    """UserDao backed by the ``users`` table.

    Each call runs in its own transaction on the given engine. Database
    errors (``sqlalchemy.exc.SQLAlchemyError``) are not caught.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    # --- writes ---

    def save(self, user: User) -> None:
        """Insert ``user``, or overwrite the row that already has its id."""
        with self.engine.begin() as conn:
            result = conn.execute(
                update(users)
                .where(users.c.id == user.id)
                .values(username=user.username, password=user.password)
            )
            if result.rowcount == 0:
                conn.execute(
                    insert(users).values(
                        id=user.id, username=user.username, password=user.password
                    )
                )
        logger.debug("Saved user id=%s", user.id)

    def delete(self, user_id: int) -> bool:
        with self.engine.begin() as conn:
            result = conn.execute(delete(users).where(users.c.id == user_id))
            deleted = result.rowcount == 1
        logger.debug("Delete user id=%s -> %s", user_id, deleted)
        return deleted

    # --- lookups ---

    def get(self, user_id: int) -> User | None:
        """Return the stored user with the given id, or None."""
        stmt = select(users.c.id, users.c.username, users.c.password).where(
            users.c.id == user_id
        )
        with self.engine.connect() as conn:
            if not (row := conn.execute(stmt).fetchone()):
                return None
        return User.of(int(row.id), row.username, row.password)
