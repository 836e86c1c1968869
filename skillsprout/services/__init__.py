from skillsprout.services.auth import AuthService
from skillsprout.services.courses import CourseService
from skillsprout.services.expiry import sweep_expired_courses
from skillsprout.services.progress import ProgressService

__all__ = ["AuthService", "CourseService", "ProgressService", "sweep_expired_courses"]
