"""Domain layer: the `User` value object and domain errors."""

from .errors import DomainError, MissingCredentialsError
from .user import User

__all__ = ["DomainError", "MissingCredentialsError", "User"]
