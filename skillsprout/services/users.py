"""User store: email lookup and creation with a unique-email guarantee."""
import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from skillsprout.core.errors import ConflictError
from skillsprout.models.user import User

logger = logging.getLogger(__name__)


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    """Exact, case-sensitive match on the stored email."""
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def create_user(
    db: AsyncSession,
    *,
    email: str,
    full_name: str,
    password_hash: str,
    emoji: str,
    hearts: int = 5,
) -> User:
    """Insert a new user with zeroed counters.

    Raises ConflictError when the email is already taken, including the case
    where a concurrent registration wins the race after our existence check.
    """
    user = User(
        id=str(uuid.uuid4()),
        email=email,
        full_name=full_name,
        password_hash=password_hash,
        emoji=emoji,
        xp=0,
        streak=0,
        hearts=hearts,
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError("Email already registered") from None
    await db.refresh(user)
    return user
