"""Shared FastAPI dependencies: configured services and the bearer user id."""
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from skillsprout.core.config import Settings
from skillsprout.core.errors import AuthError
from skillsprout.core.security import PasswordHasher, TokenIssuer
from skillsprout.db.session import get_db
from skillsprout.services.auth import AuthService
from skillsprout.services.courses import CourseService
from skillsprout.services.progress import ProgressService

# auto_error=False so a missing header goes through our own AuthError
_bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.tokens


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.hasher


def get_current_user_id(
    tokens: Annotated[TokenIssuer, Depends(get_token_issuer)],
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer_scheme)],
) -> str:
    """Resolve the bearer token to a user id before anything touches the store."""
    if credentials is None:
        raise AuthError("Unauthorized")
    return tokens.verify(credentials.credentials)


def get_auth_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[TokenIssuer, Depends(get_token_issuer)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> AuthService:
    return AuthService(db, hasher, tokens, settings)


def get_course_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> CourseService:
    return CourseService(db, settings)


def get_progress_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProgressService:
    return ProgressService(db)
