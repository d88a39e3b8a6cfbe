"""Alembic environment for the userreg schema.

The database URL is taken from ``-x url=...``, then the config's
``sqlalchemy.url`` (set by `userreg.config.build_alembic_config`), then
``USERREG_DB_URL``. Column types are compared on autogenerate; SQLite gets
batch mode so table rebuilds work.
"""

from alembic import context
from sqlalchemy import engine_from_config, pool

import userreg.adapters.db.schema  # noqa: F401 # pylint: disable=unused-import
from userreg import config as userreg_config
from userreg.adapters.db.metadata import metadata

# pylint: disable=no-member

alembic_config = context.config


def get_url() -> str:
    """Resolve the database URL to migrate."""
    if url := context.get_x_argument(as_dictionary=True).get("url"):
        return url
    if url := alembic_config.get_main_option(userreg_config.ALEMBIC_URL_KEY):
        return url
    return userreg_config.get_db_url()


def run_migrations_offline() -> None:
    """Emit migration SQL for the URL's dialect without connecting."""
    context.configure(
        url=get_url(),
        target_metadata=metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations over a single pooled-less connection."""
    connectable = engine_from_config(
        {"sqlalchemy.url": get_url()}, prefix="sqlalchemy.", poolclass=pool.NullPool
    )
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=metadata,
            compare_type=True,
            render_as_batch=connection.dialect.name == "sqlite",
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
