"""create users table

Revision ID: 3f6a1c2d9e07
Revises:
Create Date: 2026-10-19 17:05:12.418203

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f6a1c2d9e07"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=False,
            nullable=False,
            comment="Caller-supplied user identifier.",
        ),
        sa.Column(
            "username",
            sa.String(length=255),
            nullable=False,
            comment="Login name.",
        ),
        sa.Column(
            "password",
            sa.String(length=255),
            nullable=False,
            comment="Plaintext password.",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_users")),
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("users")
