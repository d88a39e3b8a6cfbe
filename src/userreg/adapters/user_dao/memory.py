"""In-memory UserDao implementation."""

from __future__ import annotations

import logging

from userreg.domain import User
from userreg.interfaces.user_dao import UserDao

logger = logging.getLogger(__name__)


class InMemoryUserDao(UserDao):
    """In-memory UserDao keyed by user id.

    Note: This implementation is not thread-safe and is intended for
    single-threaded use (tests, demos, the default bootstrap wiring).
    """

    def __init__(self, users: dict[int, User] | None = None) -> None:
        self.users: dict[int, User] = dict(users or {})

    def save(self, user: User) -> None:
        """Insert or replace the stored user with ``user.id``."""
        self.users[user.id] = user
        logger.debug("Saved user id=%s", user.id)

    def get(self, user_id: int) -> User | None:
        """Return the stored user with the given id, or None."""
        return self.users.get(user_id)

    def delete(self, user_id: int) -> bool:
        if (removed := self.users.pop(user_id, None)) is None:
            logger.debug("No user with id=%s to delete", user_id)
            return False
        logger.debug("Deleted user id=%s", removed.id)
        return True
