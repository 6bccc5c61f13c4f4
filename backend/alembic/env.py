"""Alembic runner for the customers/credits schema.

The URL comes from the same Settings the API uses (DATABASE_URL or .env),
so migrations and the running service always target one database.
alembic.ini's sqlalchemy.url is only used when no setting overrides it.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config

from credit_system.config import get_settings, normalize_database_url
from credit_system.db.base import Base
from credit_system.models import Credit, Customer  # noqa: F401  (registers tables)

alembic_config = context.config
if alembic_config.config_file_name is not None:
    fileConfig(alembic_config.config_file_name)


def credit_store_url() -> str:
    if "database_url" in get_settings().model_fields_set:
        return get_settings().database_url
    return normalize_database_url(alembic_config.get_main_option("sqlalchemy.url"))


def _configure(**kwargs) -> None:
    context.configure(target_metadata=Base.metadata, compare_type=True, **kwargs)


def migrate_offline() -> None:
    """Emit SQL for the customers/credits schema without connecting."""
    _configure(
        url=credit_store_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _migrate(connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def migrate_online() -> None:
    section = alembic_config.get_section(alembic_config.config_ini_section, {})
    section["sqlalchemy.url"] = credit_store_url()
    engine = async_engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    migrate_offline()
else:
    asyncio.run(migrate_online())
