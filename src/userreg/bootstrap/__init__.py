"""Bootstrap package for wiring userreg components."""

from .bootstrap import AppContainer, bootstrap, build_user_dao

__all__ = ["AppContainer", "bootstrap", "build_user_dao"]
