"""Alembic environment for the ParkSys schema.

The target URL is DATABASE_URL from parksys settings; ``alembic -x url=...``
overrides it for one run.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy.pool import NullPool

from parksys.core.config import get_settings
from parksys.core.database import Database

# Importing the package registers every table on Base.metadata.
from parksys.models import Base

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def database_url() -> str:
    return context.get_x_argument(as_dictionary=True).get("url") or get_settings().DATABASE_URL


def run_migrations_offline() -> None:
    """Emit the migration SQL to stdout instead of executing it."""
    context.configure(
        url=database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    # Migrations run once and exit; no pool to keep around.
    database = Database(database_url(), poolclass=NullPool)
    try:
        with database.engine.connect() as connection:
            context.configure(
                connection=connection,
                target_metadata=target_metadata,
                compare_type=True,
            )
            with context.begin_transaction():
                context.run_migrations()
    finally:
        database.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
