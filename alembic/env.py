"""Alembic async env — runs autogenerate against all user_api/domain/* models.

Migrations connect through `build_engine`, so they see the same settings
(DATABASE_URL, echo, SQLite connect args and sort-key function) as the API.
"""

from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context

from user_api.core.config import get_settings
from user_api.db.base import Base, build_engine

# Load all ORM models so Alembic can detect them
import user_api.domain  # noqa: F401

config = context.config
if config.config_file_name:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata
settings = get_settings()


def run_migrations_offline() -> None:
    context.configure(
        url=settings.database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=settings.is_sqlite,  # SQLite needs batch mode for ALTER
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    engine = build_engine(settings)
    async with engine.connect() as connection:
        await connection.run_sync(
            lambda sync_conn: context.configure(
                connection=sync_conn,
                target_metadata=target_metadata,
                render_as_batch=settings.is_sqlite,
                compare_type=True,
            )
        )
        async with connection.begin():
            await connection.run_sync(lambda _: context.run_migrations())
    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
