"""Pydantic schemas for progress sync."""
from typing import Any

from skillsprout.schemas.base import CamelSchema


class ProgressSyncSchema(CamelSchema):
    course_id: str | None = None
    progress_data: Any = None


class ProgressOutSchema(CamelSchema):
    # a single payload, null, or {courseId: payload}
    progress: Any = None
