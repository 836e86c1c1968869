"""
Tests for engine and application construction.
"""

import importlib

import pytest

from skillsprout.core.config import DEV_SECRET_KEY, Settings
from skillsprout.db.session import build_engine
from skillsprout.factory import create_app


class TestBuildEngine:
    def test_database_without_native_upsert_refused(self):
        with pytest.raises(RuntimeError, match="Unsupported database 'mysql'"):
            build_engine("mysql+aiomysql://user:pw@localhost/skillsprout")

    async def test_sqlite_accepted(self, tmp_path):
        engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'ok.db'}")
        assert engine.dialect.name == "sqlite"
        await engine.dispose()


class TestCreateApp:
    def test_production_with_dev_secret_refused(self, tmp_path):
        settings = Settings(
            database_url=f"sqlite+aiosqlite:///{tmp_path / 'prod.db'}",
            secret_key=DEV_SECRET_KEY,
            environment="production",
        )
        with pytest.raises(RuntimeError, match="SECRET_KEY"):
            create_app(settings)

    def test_factory_import_builds_nothing(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.delenv("SECRET_KEY", raising=False)

        import skillsprout.factory

        module = importlib.reload(skillsprout.factory)
        assert not hasattr(module, "app")
