"""Alembic environment for the users / refresh_tokens schema.

The URL always comes from Settings (DATABASE_URL), never from alembic.ini.
After an online `alembic upgrade` the bootstrap admin seeder runs; pass
`-x seed=false` to skip it.
"""

import asyncio
import os
import sys
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_engine_from_config,
    async_sessionmaker,
)

from alembic import context
from src.core.config import settings
from src.infrastructure.persistence import BaseModel
from src.infrastructure.persistence import models  # noqa: F401  (registers tables)

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

config.set_main_option("sqlalchemy.url", settings.database_url)
target_metadata = BaseModel.metadata


def run_migrations_offline() -> None:
    """Emit migration SQL for the configured URL without connecting."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


def _seeding_requested() -> bool:
    # cmd_opts.cmd is (command function, positional names, keyword names)
    cmd = getattr(getattr(config, "cmd_opts", None), "cmd", None)
    if not cmd or getattr(cmd[0], "__name__", None) != "upgrade":
        return False
    flag = context.get_x_argument(as_dictionary=True).get("seed", "true")
    return flag.lower() not in {"0", "false", "no"}


async def _seed(engine: AsyncEngine) -> None:
    # seeds/ lives beside this file, outside the installed package
    sys.path.insert(0, os.path.dirname(__file__))
    from seeds import run_all_seeders

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        await run_all_seeders(session)
        await session.commit()


async def run_async_migrations() -> None:
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    async with engine.connect() as connection:
        await connection.run_sync(do_run_migrations)

    if _seeding_requested():
        await _seed(engine)

    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_async_migrations())
