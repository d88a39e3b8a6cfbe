"""Interface for user data-access collaborators."""

import abc

# pylint: disable=too-few-public-methods


class UserDao(abc.ABC):
    """Contract for an external user store consulted on deletion.

    Implementations may block or fail; callers get whatever the store
    returns or raises, untranslated.
    """

    @abc.abstractmethod
    def delete(self, user_id: int) -> bool:
        """Delete the user with the given id.

        Args:
            user_id: Identifier of the user to remove.

        Returns:
            bool: True if a user was removed, False if none matched.
        """
