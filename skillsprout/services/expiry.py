"""Expiry sweep: purge courses older than the retention window."""
import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from skillsprout.models.course import Course

logger = logging.getLogger(__name__)


def expiry_cutoff(retention: timedelta, now: datetime | None = None) -> datetime:
    return (now or datetime.now(timezone.utc)) - retention


async def sweep_expired_courses(
    db: AsyncSession,
    retention: timedelta,
    now: datetime | None = None,
) -> int:
    """Delete courses created before ``now - retention``; return how many.

    Best effort: a failure is logged and rolled back, never raised, so the
    read it runs in front of still goes ahead.
    """
    cutoff = expiry_cutoff(retention, now)
    try:
        result = await db.execute(delete(Course).where(Course.created_at < cutoff))
        await db.commit()
    except SQLAlchemyError:
        logger.exception("Failed to clean up expired courses")
        await db.rollback()
        return 0

    deleted = result.rowcount or 0
    if deleted:
        logger.info("Purged %d expired course(s) created before %s", deleted, cutoff.isoformat())
    return deleted
