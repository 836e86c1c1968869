"""Shared fixtures: a throwaway SQLite database per test, services and an HTTP client."""
from typing import AsyncGenerator

import httpx
import pytest

from skillsprout.core.config import Settings
from skillsprout.core.security import PasswordHasher, TokenIssuer
from skillsprout.db.base import Base
from skillsprout.db.session import build_engine, build_sessionmaker
from skillsprout.factory import create_app
from skillsprout.services.auth import AuthService
from skillsprout.services.courses import CourseService
from skillsprout.services.progress import ProgressService

from tests.helpers import TEST_SECRET


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        secret_key=TEST_SECRET,
        bcrypt_rounds=4,  # passlib's minimum, keeps the suite fast
        environment="development",
    )


@pytest.fixture
async def engine(settings):
    engine = build_engine(settings.database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def sessionmaker(engine):
    return build_sessionmaker(engine)


@pytest.fixture
async def db(sessionmaker):
    async with sessionmaker() as session:
        yield session


@pytest.fixture
def hasher(settings) -> PasswordHasher:
    return PasswordHasher(rounds=settings.bcrypt_rounds)


@pytest.fixture
def tokens(settings) -> TokenIssuer:
    return TokenIssuer.from_settings(settings)


@pytest.fixture
def auth_service(db, hasher, tokens, settings) -> AuthService:
    return AuthService(db, hasher, tokens, settings)


@pytest.fixture
def course_service(db, settings) -> CourseService:
    return CourseService(db, settings)


@pytest.fixture
def progress_service(db) -> ProgressService:
    return ProgressService(db)


@pytest.fixture
async def app(settings):
    app = create_app(settings)
    # ASGITransport does not run the lifespan, so create the schema here
    async with app.state.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield app
    await app.state.engine.dispose()


@pytest.fixture
async def client(app) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

