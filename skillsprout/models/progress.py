"""Progress model: one opaque progress document per (user, course)."""
from sqlalchemy import Column, DateTime, String, Text

from skillsprout.db.session import Base


class Progress(Base):
    __tablename__ = "user_progress"

    # the pair is the whole identity; no foreign keys so progress for a
    # purged course survives the expiry sweep
    user_id = Column(String(36), primary_key=True)
    course_id = Column(String(128), primary_key=True)
    # JSON string (stars / status per chapter), replaced wholesale on sync
    progress_data = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
