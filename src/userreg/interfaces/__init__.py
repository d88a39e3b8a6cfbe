"""Ports the service layer depends on."""

from .user_dao import UserDao

__all__ = ["UserDao"]
