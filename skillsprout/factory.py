"""Application factory: builds a configured FastAPI app without side effects at import."""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from skillsprout.core.config import Settings, check_secret_key, get_settings
from skillsprout.core.errors import ServiceError
from skillsprout.core.logging import configure_logging
from skillsprout.core.security import PasswordHasher, TokenIssuer
from skillsprout.db.base import Base
from skillsprout.db.session import build_engine, build_sessionmaker
from skillsprout.routers import auth, courses, progress

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # create tables for development; deployments run alembic
    async with app.state.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("%s ready (%s)", app.state.settings.app_name, app.state.settings.environment)

    yield

    await app.state.engine.dispose()


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app. Settings are read once here and injected everywhere else."""
    settings = settings or get_settings()
    configure_logging(settings)
    check_secret_key(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Accounts, shareable courses and progress sync",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = build_engine(settings.database_url, echo=settings.debug)
    app.state.sessionmaker = build_sessionmaker(app.state.engine)
    app.state.hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    app.state.tokens = TokenIssuer.from_settings(settings)

    app.add_exception_handler(ServiceError, service_error_handler)

    app.include_router(auth.router)
    app.include_router(courses.router)
    app.include_router(progress.router)

    @app.get("/health")
    async def health():
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": "skillsprout",
        }

    return app

