"""Module defining the `User` value object."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class User:
    """Immutable value object representing a registered user.

    Equality and hashing are structural: two users with the same id, username
    and password compare equal. The id is supplied by the caller and is not
    checked for uniqueness.

    Attributes:
        id: Caller-supplied integer identifier.
        username: Login name.
        password: Plaintext password. Masked in ``repr``.
    """

    id: int  # pylint: disable=invalid-name
    username: str
    password: str = field(repr=False)

    @classmethod
    def of(cls, id: int, username: str, password: str) -> User:  # pylint: disable=redefined-builtin
        """Build a fully-formed user.

        Example:
            ```py
            ivan = User.of(1, "Ivan", "2223")
            ```
        """
        return cls(id=id, username=username, password=password)
