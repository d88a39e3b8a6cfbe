"""UserDao adapters."""

from .memory import InMemoryUserDao
from .sqlalchemy_dao import SqlAlchemyUserDao

__all__ = ["InMemoryUserDao", "SqlAlchemyUserDao"]
