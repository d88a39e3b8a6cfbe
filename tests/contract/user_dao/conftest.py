"""Fixtures for UserDao contract tests."""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from userreg.adapters.user_dao import InMemoryUserDao, SqlAlchemyUserDao


@pytest.fixture(params=["memory", "sql_memory", "sql_file"])
def user_store(
    request: pytest.FixtureRequest,
) -> Iterable[InMemoryUserDao | SqlAlchemyUserDao]:
    """Return a fresh, empty UserDao adapter for the requested backend.

    Supported params:
      - `"memory"` → InMemoryUserDao
      - `"sql_memory"` → SqlAlchemyUserDao on in-memory SQLite
      - `"sql_file"` → SqlAlchemyUserDao on a migrated file-backed SQLite

    Engines are resolved lazily so only the requested backend is built.
    """

    match request.param:
        case "memory":
            yield InMemoryUserDao()
        case "sql_memory":
            yield SqlAlchemyUserDao(request.getfixturevalue("sqlite_engine_memory"))
        case "sql_file":
            yield SqlAlchemyUserDao(request.getfixturevalue("sqlite_engine_file"))
        case _:
            raise ValueError(f"unknown user store type: {request.param}")
