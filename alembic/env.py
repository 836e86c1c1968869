"""Alembic env for SkillSprout. Migrations run on a sync driver (sqlite / psycopg2)."""
from logging.config import fileConfig
import os

from alembic import context
from sqlalchemy import engine_from_config, pool

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

from skillsprout.db.base import Base  # noqa: E402
from skillsprout.core.config import get_settings  # noqa: E402

target_metadata = Base.metadata

_ASYNC_DRIVERS = {
    "postgresql+asyncpg://": "postgresql+psycopg2://",
    "sqlite+aiosqlite://": "sqlite://",
}


def sync_url(url: str) -> str:
    for async_prefix, sync_prefix in _ASYNC_DRIVERS.items():
        if url.startswith(async_prefix):
            return sync_prefix + url[len(async_prefix):]
    return url


def get_url() -> str:
    # ALEMBIC_DATABASE_URL wins, then the app's DATABASE_URL
    url = os.getenv("ALEMBIC_DATABASE_URL") or get_settings().database_url
    return sync_url(url) if url else config.get_main_option("sqlalchemy.url")


def _configure(**kwargs) -> None:
    url = get_url()
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        # SQLite cannot ALTER most things in place
        render_as_batch=url.startswith("sqlite"),
        **kwargs,
    )


def run_migrations_offline() -> None:
    _configure(url=get_url(), literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    section = config.get_section(config.config_ini_section) or {}
    section["sqlalchemy.url"] = get_url()
    connectable = engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)

    with connectable.connect() as connection:
        _configure(connection=connection)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
