"""Pydantic schemas for saving, fetching and listing courses."""
from typing import Any

from skillsprout.schemas.base import CamelSchema


class CourseSaveSchema(CamelSchema):
    # The course document is opaque apart from id / topic / depth / icon.
    course: dict[str, Any] | None = None
    user_id: str | None = None
    generated_by_name: str | None = None
    is_public: bool | None = None


class CourseSaveOutSchema(CamelSchema):
    success: bool = True
    id: str


class CourseDetailOutSchema(CamelSchema):
    course: Any
    generated_by_name: str | None = None


class CourseListOutSchema(CamelSchema):
    courses: list[Any]
