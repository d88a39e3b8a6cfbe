"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                           Login related errors
# ============================================================================


class MissingCredentialsError(DomainError, ValueError):
    """Raised when a login is attempted without a username or a password.

    Attributes:
        username_missing (bool): True if the username was None.
        password_missing (bool): True if the password was None.
    """

    MESSAGE = "username or password is null"

    def __init__(self, username_missing: bool, password_missing: bool) -> None:
        super().__init__(self.MESSAGE)
        self.username_missing = username_missing
        self.password_missing = password_missing
