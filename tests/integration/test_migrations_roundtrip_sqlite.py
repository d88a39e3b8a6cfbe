"""Alembic round-trip smoke test for SQLite.

Exercises *upgrade → downgrade* against a temporary, file-backed SQLite
database to ensure `upgrade head` creates the `users` table and
`downgrade base` drops it.
"""

from __future__ import annotations

from pathlib import Path

from alembic import command
from sqlalchemy import create_engine, inspect, text

from userreg import config

USERS_TABLE_QUERY = "SELECT name FROM sqlite_master WHERE type='table' AND name='users'"


def test_alembic_upgrade_downgrade_roundtrip_sqlite_tmp(tmp_path: Path):
    """Upgrade to head (assert table exists) → downgrade to base (assert dropped)."""

    url = f"sqlite:///{tmp_path / 'users.db'}"
    command.upgrade(config.build_alembic_config(url), "head")
    eng = create_engine(url, future=True)

    with eng.begin() as c:
        assert c.execute(text(USERS_TABLE_QUERY)).fetchone(), (
            "users should exist after upgrade"
        )

    command.downgrade(config.build_alembic_config(url), "base")

    with eng.begin() as c:
        assert not c.execute(text(USERS_TABLE_QUERY)).fetchone(), (
            "users should be dropped after downgrade"
        )

    eng.dispose()


def test_migrated_schema_matches_table_definition(tmp_path: Path):
    """The migrated table has the same columns and primary key as `schema.users`."""

    url = f"sqlite:///{tmp_path / 'users.db'}"
    command.upgrade(config.build_alembic_config(url), "head")
    eng = create_engine(url, future=True)

    inspector = inspect(eng)
    columns = {c["name"]: c for c in inspector.get_columns("users")}
    pk = inspector.get_pk_constraint("users")
    eng.dispose()

    assert list(columns) == ["id", "username", "password"]
    assert not any(c["nullable"] for c in columns.values())
    assert pk["constrained_columns"] == ["id"]
    assert pk["name"] == "pk_users"


def test_upgrade_falls_back_to_env_url(tmp_path: Path, monkeypatch):
    """Without a URL in the config, migrations target USERREG_DB_URL."""

    url = f"sqlite:///{tmp_path / 'env.db'}"
    monkeypatch.setenv("USERREG_DB_URL", url)
    command.upgrade(config.build_alembic_config(), "head")
    eng = create_engine(url)

    with eng.begin() as c:
        assert c.execute(text(USERS_TABLE_QUERY)).fetchone()

    eng.dispose()
