import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool

from soulcrush.db.base import Base
from soulcrush.db.session import create_db_engine
import soulcrush.db.models  # noqa: F401

config = context.config

# Only configure logging when run from the alembic CLI; the app sets up its own
if config.cmd_opts is not None and config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def get_url() -> str:
    url = config.get_main_option("sqlalchemy.url")
    if config.cmd_opts is not None:
        url = os.getenv("DATABASE_URL", url)
    return url


def run_migrations_offline() -> None:
    """Emit SQL to stdout instead of running against a database."""
    url = get_url()
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=url.startswith("sqlite"),
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = create_db_engine(get_url(), poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()

    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
