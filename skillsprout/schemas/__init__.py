from skillsprout.schemas.user import AuthOutSchema, LoginSchema, RegisterSchema, UserOutSchema
from skillsprout.schemas.course import (
    CourseDetailOutSchema,
    CourseListOutSchema,
    CourseSaveOutSchema,
    CourseSaveSchema,
)
from skillsprout.schemas.progress import ProgressOutSchema, ProgressSyncSchema

__all__ = [
    "AuthOutSchema",
    "LoginSchema",
    "RegisterSchema",
    "UserOutSchema",
    "CourseDetailOutSchema",
    "CourseListOutSchema",
    "CourseSaveOutSchema",
    "CourseSaveSchema",
    "ProgressOutSchema",
    "ProgressSyncSchema",
]
