from skillsprout.models.user import User
from skillsprout.models.course import Course
from skillsprout.models.progress import Progress

__all__ = ["User", "Course", "Progress"]
