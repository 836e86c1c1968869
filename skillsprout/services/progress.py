"""Per-user course progress: full-replace upsert and reads."""
import json
import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from skillsprout.core.errors import InternalError, ValidationError
from skillsprout.db.upsert import insert_for
from skillsprout.models.progress import Progress

logger = logging.getLogger(__name__)


class ProgressService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def sync(
        self,
        user_id: str,
        course_id: str | None,
        progress_data: Any,
        now: datetime | None = None,
    ) -> None:
        """Store ``progress_data`` for (user, course), replacing any previous payload.

        No merge: the last write wins for the whole document.
        """
        if not course_id or not progress_data:
            raise ValidationError("Missing required fields")

        stmt = insert_for(self.db, Progress).values(
            user_id=user_id,
            course_id=course_id,
            progress_data=json.dumps(progress_data),
            updated_at=now or datetime.now(timezone.utc),
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "course_id"],
            set_={
                "progress_data": stmt.excluded.progress_data,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        try:
            await self.db.execute(stmt)
            await self.db.commit()
        except SQLAlchemyError:
            logger.exception("Progress sync failed for user %s", user_id)
            await self.db.rollback()
            raise InternalError("Failed to sync progress") from None

    async def get(self, user_id: str, course_id: str) -> Any | None:
        """Payload for one course, or None when nothing was synced yet."""
        try:
            result = await self.db.execute(
                select(Progress.progress_data).where(
                    Progress.user_id == user_id,
                    Progress.course_id == course_id,
                )
            )
            raw = result.scalar_one_or_none()
        except SQLAlchemyError:
            logger.exception("Progress fetch failed for user %s", user_id)
            raise InternalError("Failed to fetch progress") from None
        return json.loads(raw) if raw is not None else None

    async def get_all(self, user_id: str) -> dict[str, Any]:
        """``{course_id: payload}`` for every course the user has progress on."""
        try:
            result = await self.db.execute(
                select(Progress.course_id, Progress.progress_data).where(Progress.user_id == user_id)
            )
            rows = result.all()
        except SQLAlchemyError:
            logger.exception("Progress fetch failed for user %s", user_id)
            raise InternalError("Failed to fetch progress") from None
        return {row.course_id: json.loads(row.progress_data) for row in rows}
