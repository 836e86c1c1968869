"""Registration and login: password hashing + user store + token issuing."""
import logging

from jose import JWTError
from passlib.exc import PasswordValueError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from skillsprout.core.config import Settings
from skillsprout.core.errors import AuthError, ConflictError, InternalError, ValidationError
from skillsprout.core.security import PasswordHasher, TokenIssuer
from skillsprout.models.user import User
from skillsprout.services.users import create_user, get_user_by_email

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class AuthService:
    def __init__(
        self,
        db: AsyncSession,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
        settings: Settings,
    ):
        self.db = db
        self.hasher = hasher
        self.tokens = tokens
        self.settings = settings

    async def register(
        self,
        email: str | None,
        password: str | None,
        full_name: str | None,
        emoji: str | None = None,
    ) -> tuple[User, str]:
        """Create an account and return it with a fresh bearer token."""
        if not email or not password or not full_name:
            raise ValidationError("Missing required fields")

        try:
            if await get_user_by_email(self.db, email) is not None:
                raise ConflictError("Email already registered")
            password_hash = await run_in_threadpool(self.hasher.hash, password)
            user = await create_user(
                self.db,
                email=email,
                full_name=full_name,
                password_hash=password_hash,
                emoji=emoji or self.settings.default_emoji,
                hearts=self.settings.default_hearts,
            )
            token = self.tokens.issue(user.id)
        except PasswordValueError:
            raise ValidationError("Invalid password") from None
        except (SQLAlchemyError, ValueError, JWTError):
            logger.exception("Registration failed")
            raise InternalError("Failed to register") from None

        logger.info("Registered user %s", user.id)
        return user, token

    async def login(self, email: str | None, password: str | None) -> tuple[User, str]:
        """Check credentials and return the user with a fresh bearer token.

        Every failure is the same AuthError, whether the email is unknown or
        the password is wrong.
        """
        if not email or not password:
            raise ValidationError("Missing required fields")

        try:
            user = await get_user_by_email(self.db, email)
            if user is None:
                await run_in_threadpool(self.hasher.dummy_verify)
                ok = False
            else:
                ok = await run_in_threadpool(self.hasher.verify, password, user.password_hash)
            if not ok:
                logger.info("Failed login attempt")
                raise AuthError(INVALID_CREDENTIALS)
            token = self.tokens.issue(user.id)
        except (SQLAlchemyError, JWTError):
            logger.exception("Login failed")
            raise InternalError("Failed to login") from None

        logger.info("Login: %s", user.id)
        return user, token
