"""Service layer: the user registry."""

from .errors import UserDaoNotConfiguredError
from .user_service import UserService

__all__ = ["UserDaoNotConfiguredError", "UserService"]
