"""Password hashing (bcrypt via passlib) and bearer tokens (JWT via python-jose)."""
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from skillsprout.core.config import Settings
from skillsprout.core.errors import AuthError


class PasswordHasher:
    """Salted, slow one-way hash with constant-time verify."""

    def __init__(self, rounds: int = 10):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, plain: str, hashed: str) -> bool:
        try:
            return self._context.verify(plain, hashed)
        except (ValueError, TypeError):
            # unreadable stored hash counts as a mismatch
            return False

    def dummy_verify(self) -> None:
        """Burn one verify worth of time when there is no user to check against."""
        self._context.dummy_verify()


class TokenIssuer:
    """Issues and verifies signed, time-limited bearer tokens.

    Tokens are stateless: the only claims checked are the signature, ``exp``
    and the ``sub`` user id. There is no issuer/audience check and no
    revocation, so a leaked token stays valid until it expires.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_days: int = 30):
        self._secret_key = secret_key
        self._algorithm = algorithm
        self.ttl = timedelta(days=expire_days)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        return cls(
            settings.secret_key,
            algorithm=settings.algorithm,
            expire_days=settings.access_token_expire_days,
        )

    def issue(self, user_id: str, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + self.ttl,
        }
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        """Return the user id carried by ``token``; raise AuthError otherwise."""
        if not token:
            raise AuthError("Invalid token")
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require_exp": True},
            )
        except JWTError as exc:
            raise AuthError("Invalid token") from exc

        user_id = claims.get("sub")
        if not isinstance(user_id, str) or not user_id:
            raise AuthError("Invalid token")
        return user_id
