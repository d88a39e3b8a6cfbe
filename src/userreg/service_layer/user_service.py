"""In-memory user registry.

`UserService` owns an ordered list of `User` records and offers registration,
retrieval, an id-keyed view, a plaintext login check, and deletion delegated
to an injected `UserDao`.

Behavior notes:
    - Insertion order is preserved and duplicate ids are allowed.
    - `get_all_converted_by_id()` is rebuilt on every call; when ids collide
      the most recently added user wins.
    - `delete()` returns whatever the collaborator returns and lets its
      exceptions propagate untouched.
    - Not thread-safe.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from userreg.domain import MissingCredentialsError, User

from .errors import UserDaoNotConfiguredError

if TYPE_CHECKING:
    from userreg.interfaces.user_dao import UserDao

logger = logging.getLogger(__name__)


class UserService:
    """Registry of users held in memory.

    Args:
        user_dao: Optional store consulted by `delete()`.
    """

    def __init__(self, user_dao: UserDao | None = None) -> None:
        self.user_dao = user_dao
        self._users: list[User] = []

    def get_all(self) -> list[User]:
        """Return the registered users in insertion order.

        The live list is returned, not a copy.
        """
        return self._users

    def add(self, *users: User) -> bool:
        """Append each user in argument order.

        Returns:
            bool: Always True; the list has no capacity limit.

        Raises:
            TypeError: If any argument is None. Nothing is appended in that case.
        """
        if any(user is None for user in users):
            raise TypeError("cannot add None to the user registry")
        self._users.extend(users)
        logger.debug(
            "Added %d user(s); registry size=%d", len(users), len(self._users)
        )
        return True

    def get_all_converted_by_id(self) -> dict[int, User]:
        """Build a mapping from user id to user over the current registry.

        Later insertions overwrite earlier ones sharing the same id.
        """
        by_id = {user.id: user for user in self._users}
        logger.debug(
            "Built id view: %d id(s) over %d user(s)", len(by_id), len(self._users)
        )
        return by_id

    def login(self, username: str | None, password: str | None) -> User | None:
        """Return the first user matching both username and password.

        Args:
            username: Login name to match exactly.
            password: Plaintext password to match exactly.

        Returns:
            User | None: The first match in insertion order, or None.

        Raises:
            MissingCredentialsError: If username or password is None.
        """
        if username is None or password is None:
            raise MissingCredentialsError(
                username_missing=username is None, password_missing=password is None
            )

        for user in self._users:
            if user.username == username and user.password == password:
                logger.debug("Login succeeded for %r (id=%s)", username, user.id)
                return user

        logger.debug("Login failed for %r", username)
        return None

    def delete(self, user_id: int) -> bool:
        """Delete a user through the injected UserDao.

        Returns:
            bool: The collaborator's result, unchanged.

        Raises:
            UserDaoNotConfiguredError: If the service has no UserDao.
        """
        if self.user_dao is None:
            raise UserDaoNotConfiguredError("delete")
        result = self.user_dao.delete(user_id)
        logger.debug("Delete id=%s -> %s", user_id, result)
        return result
