"""Async SQLAlchemy engine, session factory and the declarative Base."""
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from skillsprout.db.upsert import UPSERT_INSERTS


class Base(DeclarativeBase):
    pass


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create the async engine; only databases with a native upsert are accepted."""
    backend = make_url(database_url).get_backend_name()
    if backend not in UPSERT_INSERTS:
        raise RuntimeError(
            f"Unsupported database {backend!r}: DATABASE_URL must point at SQLite or PostgreSQL"
        )

    kwargs = {"echo": echo}
    if database_url.startswith("sqlite"):
        # wait on SQLITE_BUSY instead of failing concurrent writers
        kwargs["connect_args"] = {"timeout": 30}
    else:
        kwargs.update(pool_size=10, max_overflow=20, pool_recycle=3600)
    return create_async_engine(database_url, **kwargs)


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request."""
    async with request.app.state.sessionmaker() as session:
        yield session
