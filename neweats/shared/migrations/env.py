# pylint: skip-file
# ruff: noqa
"""
Alembic Environment Configuration

Runs the NewEats migrations against PostgreSQL through the async
(asyncpg) engine, or renders them as SQL in offline mode.

Database URL:
=============
    alembic upgrade head                              ← settings.DATABASE_URL
    alembic -x db_url=postgresql+asyncpg://... upgrade head   ← explicit URL

The explicit form is how a separate test database is migrated without
touching the environment the API reads.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

from neweats.config.settings import settings
from neweats.shared.models import Base, Recipe, RecipeUser, ShoppingList, User

# Every mapped table must be registered on Base.metadata before autogenerate
REGISTERED_MODELS = (User, Recipe, RecipeUser, ShoppingList)

config = context.config

database_url = context.get_x_argument(as_dictionary=True).get("db_url", settings.DATABASE_URL)
config.set_main_option("sqlalchemy.url", database_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """
    Render migrations as SQL without connecting.

    Usage:
        alembic upgrade head --sql > schema.sql
    """
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Apply migrations over a single unpooled async connection."""
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_async_migrations())
