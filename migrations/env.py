import asyncio
import logging

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine
from alembic import context

from app.core.config import settings
from app.db.session import Base
# every table has to be registered on Base.metadata before autogenerate runs
from app.models import user, expense, settlement, payment_history, paid_expense  # noqa: F401

logger = logging.getLogger("alembic.env")

config = context.config
target_metadata = Base.metadata


def get_url() -> str:
    # alembic.ini wins when it names a database, otherwise use the app's DATABASE_URL
    return config.get_main_option("sqlalchemy.url") or settings.DATABASE_URL


def _configure(**kwargs):
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=get_url().startswith("sqlite"),
        **kwargs
    )


def run_migrations_offline():
    _configure(
        url=get_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_sync_migrations(connection: Connection):
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online():
    engine = create_async_engine(get_url(), poolclass=pool.NullPool)

    async with engine.connect() as connection:
        await connection.run_sync(run_sync_migrations)

    await engine.dispose()
    logger.info("Migrations applied to %s", engine.url.render_as_string(hide_password=True))


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
