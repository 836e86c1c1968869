"""Course model: a generated course document, optionally owned and shared."""
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Text

from skillsprout.db.session import Base


class Course(Base):
    __tablename__ = "courses"

    id = Column(String(128), primary_key=True)  # client-assigned
    # NULL for anonymous / shared courses
    user_id = Column(String(36), ForeignKey("users.id"), nullable=True, index=True)
    topic = Column(String(255), nullable=False, index=True)
    depth = Column(String(64), nullable=False, default="")
    icon = Column(String(64), nullable=False, default="")
    # full course document as a JSON string, never interpreted by the store
    data = Column(Text, nullable=False)
    is_public = Column(Boolean, nullable=False, default=False)
    generated_by_name = Column(String(255), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False)
