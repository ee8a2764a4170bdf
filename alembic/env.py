"""Alembic environment — runs the users/exercises migrations on the app's async driver.

The target URL is resolved the same way the API resolves it (DATABASE_URL env var,
.env, then the SQLite default), so `alembic upgrade head` migrates the store the
server will open. An explicit sqlalchemy.url passed with `-x url=...` wins.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

from exercise_tracker.config import Settings, normalize_database_url
from exercise_tracker.db.base import Base
import exercise_tracker.models  # noqa: F401  (populates Base.metadata)

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def resolve_url() -> str:
    override = context.get_x_argument(as_dictionary=True).get("url")
    if override:
        return normalize_database_url(override)
    return Settings().database_url


def _configure(**kwargs) -> None:
    context.configure(target_metadata=target_metadata, **kwargs)
    with context.begin_transaction():
        context.run_migrations()


async def _migrate_online(url: str) -> None:
    engine = create_async_engine(url, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(lambda conn: _configure(connection=conn))
    finally:
        await engine.dispose()


if context.is_offline_mode():
    # emits SQL only; no connection
    _configure(
        url=resolve_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
else:
    asyncio.run(_migrate_online(resolve_url()))
