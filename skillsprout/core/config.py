"""Application configuration from environment."""
import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Known, public value. Only good enough for local development.
DEV_SECRET_KEY = "skillsprout-dev-secret-change-me"


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "SkillSprout"
    environment: str = "development"  # development | production
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./skillsprout.db"

    # Bearer tokens (JWT)
    secret_key: str = DEV_SECRET_KEY
    algorithm: str = "HS256"
    access_token_expire_days: int = 30

    # Password hashing
    bcrypt_rounds: int = 10

    # Courses
    course_retention_days: int = 7
    course_list_default_limit: int = 10
    course_list_max_limit: int = 100

    # New users
    default_emoji: str = "👤"
    default_hearts: int = 5

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def check_secret_key(settings: Settings) -> None:
    """Refuse the development signing secret in production, warn elsewhere."""
    if settings.secret_key != DEV_SECRET_KEY:
        return
    if settings.is_production:
        raise RuntimeError(
            "SECRET_KEY is not set: the development fallback cannot be used in production"
        )
    logger.warning(
        "Using the built-in development SECRET_KEY; tokens are forgeable. "
        "Set SECRET_KEY before deploying."
    )
