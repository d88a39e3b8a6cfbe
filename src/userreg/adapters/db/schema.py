"""User store schema.

Defines the ``users`` table backing `SqlAlchemyUserDao`. The table mirrors the
`User` value object one column per field; the caller-supplied id is the
primary key.

The authoritative DDL lives in the Alembic migrations; this definition must
stay in step with them.
"""

from __future__ import annotations

from sqlalchemy import Column, Integer, String, Table

from userreg.adapters.db.metadata import metadata

__all__ = ["users"]

users = Table(
    "users",
    metadata,
    Column(
        "id",
        Integer,
        primary_key=True,
        autoincrement=False,
        comment="Caller-supplied user identifier.",
    ),
    Column("username", String(length=255), nullable=False, comment="Login name."),
    Column(
        "password", String(length=255), nullable=False, comment="Plaintext password."
    ),
)
