"""Dialect-aware ``INSERT ... ON CONFLICT`` construction.

Both SQLite and PostgreSQL support native upserts; SQLAlchemy exposes them
through dialect-specific ``insert()`` constructs. The statement is built for
whatever dialect the session is bound to so that the conflict resolution
happens atomically inside the store. Other databases are refused when the
engine is built (see ``db.session.build_engine``).
"""
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

UPSERT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


def insert_for(session: AsyncSession, table):
    """Return an ``insert(table)`` that supports ``on_conflict_do_update``."""
    return UPSERT_INSERTS[session.get_bind().dialect.name](table)
