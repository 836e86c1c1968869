"""Progress routes. Both require a bearer token."""
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from skillsprout.routers.deps import get_current_user_id, get_progress_service
from skillsprout.schemas.progress import ProgressOutSchema, ProgressSyncSchema
from skillsprout.services.progress import ProgressService

router = APIRouter(prefix="/api/progress", tags=["progress"])


@router.post("")
async def sync_progress(
    body: ProgressSyncSchema,
    user_id: Annotated[str, Depends(get_current_user_id)],
    progress: Annotated[ProgressService, Depends(get_progress_service)],
):
    """Replace the caller's progress for one course."""
    await progress.sync(user_id, body.course_id, body.progress_data)
    return {"success": True}


@router.get("", response_model=ProgressOutSchema)
async def get_progress(
    user_id: Annotated[str, Depends(get_current_user_id)],
    progress: Annotated[ProgressService, Depends(get_progress_service)],
    course_id: Annotated[str | None, Query(alias="courseId")] = None,
):
    """One course's payload (or null) with ``courseId``, else every course's payload."""
    if course_id:
        return ProgressOutSchema(progress=await progress.get(user_id, course_id))
    return ProgressOutSchema(progress=await progress.get_all(user_id))
