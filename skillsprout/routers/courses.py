"""Course routes: save (upsert), list (swept), fetch one (not swept)."""
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from skillsprout.routers.deps import get_course_service
from skillsprout.schemas.course import (
    CourseDetailOutSchema,
    CourseListOutSchema,
    CourseSaveOutSchema,
    CourseSaveSchema,
)
from skillsprout.services.courses import CourseService

router = APIRouter(prefix="/api/courses", tags=["courses"])


@router.get("", response_model=CourseListOutSchema)
async def list_courses(
    courses: Annotated[CourseService, Depends(get_course_service)],
    topic: str | None = None,
    limit: Annotated[int | None, Query(ge=1)] = None,
):
    """Newest shared courses, optionally filtered by topic substring."""
    return CourseListOutSchema(courses=await courses.list_courses(topic=topic, limit=limit))


@router.post("", response_model=CourseSaveOutSchema)
async def save_course(
    body: CourseSaveSchema,
    courses: Annotated[CourseService, Depends(get_course_service)],
):
    course_id = await courses.save(
        body.course,
        user_id=body.user_id,
        generated_by_name=body.generated_by_name,
        is_public=body.is_public,
    )
    return CourseSaveOutSchema(id=course_id)


@router.get("/{course_id}", response_model=CourseDetailOutSchema)
async def get_course(
    course_id: str,
    courses: Annotated[CourseService, Depends(get_course_service)],
):
    course, generated_by_name = await courses.get(course_id)
    return CourseDetailOutSchema(course=course, generated_by_name=generated_by_name)
