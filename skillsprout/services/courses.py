"""Courses: coalesce-merge upsert, direct fetch and swept listing."""
import json
import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from skillsprout.core.config import Settings
from skillsprout.core.errors import InternalError, NotFoundError, ValidationError
from skillsprout.db.upsert import insert_for
from skillsprout.models.course import Course
from skillsprout.services.expiry import expiry_cutoff, sweep_expired_courses

logger = logging.getLogger(__name__)

# Overwritten on every re-save.
REPLACED_FIELDS = ("topic", "depth", "icon", "data")
# Overwritten only when the new value is not NULL.
COALESCED_FIELDS = ("user_id", "generated_by_name")


def _like_pattern(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class CourseService:
    def __init__(self, db: AsyncSession, settings: Settings):
        self.db = db
        self.settings = settings
        self.retention = timedelta(days=settings.course_retention_days)

    async def save(
        self,
        course: dict[str, Any] | None,
        user_id: str | None = None,
        generated_by_name: str | None = None,
        is_public: bool | None = None,
        now: datetime | None = None,
    ) -> str:
        """Insert the course, or merge it into the stored row with the same id.

        ``topic``, ``depth``, ``icon`` and the document are replaced. Owner,
        attribution and visibility are kept when the new value is missing, so
        an anonymous re-save of a shared course does not erase its owner.
        ``created_at`` is set once and never moved.
        """
        if not isinstance(course, dict) or not course.get("id") or not course.get("topic"):
            raise ValidationError("Invalid course data")

        now = now or datetime.now(timezone.utc)
        course_id = str(course["id"])
        stmt = insert_for(self.db, Course).values(
            id=course_id,
            user_id=user_id or None,
            topic=str(course["topic"]),
            depth=str(course.get("depth") or ""),
            icon=str(course.get("icon") or ""),
            data=json.dumps(course),
            generated_by_name=generated_by_name or None,
            is_public=bool(is_public),
            created_at=now,
            updated_at=now,
        )

        changes = {name: stmt.excluded[name] for name in REPLACED_FIELDS}
        for name in COALESCED_FIELDS:
            changes[name] = func.coalesce(stmt.excluded[name], Course.__table__.c[name])
        # is_public is NOT NULL in the table, so "missing" is decided here
        if is_public is not None:
            changes["is_public"] = stmt.excluded.is_public
        changes["updated_at"] = stmt.excluded.updated_at

        stmt = stmt.on_conflict_do_update(index_elements=["id"], set_=changes)
        try:
            await self.db.execute(stmt)
            await self.db.commit()
        except SQLAlchemyError:
            logger.exception("Failed to save course %s", course_id)
            await self.db.rollback()
            raise InternalError("Failed to save course") from None

        logger.debug("Saved course %s", course_id)
        return course_id

    async def get(self, course_id: str) -> tuple[Any, str | None]:
        """Return ``(course document, generated_by_name)``.

        Not gated by the expiry sweep: an expired course that has not been
        purged yet is still returned here.
        """
        try:
            result = await self.db.execute(
                select(Course.data, Course.generated_by_name).where(Course.id == course_id)
            )
            row = result.one_or_none()
        except SQLAlchemyError:
            logger.exception("Failed to fetch course %s", course_id)
            raise InternalError("Failed to fetch course") from None

        if row is None:
            raise NotFoundError("Course not found")
        return json.loads(row.data), row.generated_by_name

    async def list_courses(
        self,
        topic: str | None = None,
        limit: int | None = None,
        now: datetime | None = None,
    ) -> list[Any]:
        """Sweep expired courses, then return the newest documents first."""
        now = now or datetime.now(timezone.utc)
        await sweep_expired_courses(self.db, self.retention, now)

        if limit is None:
            limit = self.settings.course_list_default_limit
        limit = max(1, min(limit, self.settings.course_list_max_limit))

        # also filtered here in case the sweep failed
        query = select(Course.data).where(Course.created_at >= expiry_cutoff(self.retention, now))
        if topic:
            query = query.where(Course.topic.ilike(_like_pattern(topic), escape="\\"))
        query = query.order_by(Course.created_at.desc()).limit(limit)

        try:
            result = await self.db.execute(query)
        except SQLAlchemyError:
            logger.exception("Failed to fetch courses")
            raise InternalError("Failed to fetch courses") from None
        return [json.loads(data) for data in result.scalars()]
