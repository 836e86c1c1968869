"""SQLAlchemy declarative base and model imports for Alembic."""
from skillsprout.db.session import Base

# Import all models so Alembic can see them
from skillsprout.models.course import Course  # noqa: F401
from skillsprout.models.progress import Progress  # noqa: F401
from skillsprout.models.user import User  # noqa: F401

__all__ = ["Base", "User", "Course", "Progress"]
