"""User model: credentials, profile and gamification counters."""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from skillsprout.db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True)  # uuid4 string
    email = Column(String(255), unique=True, nullable=False, index=True)  # stored as given
    full_name = Column(String(255), nullable=False)
    password_hash = Column(String(255), nullable=False)  # never leaves the service layer
    emoji = Column(String(16), nullable=False, default="👤")

    xp = Column(Integer, nullable=False, default=0)
    streak = Column(Integer, nullable=False, default=0)
    hearts = Column(Integer, nullable=False, default=5)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)
