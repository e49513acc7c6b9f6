"""Shared pytest fixtures for all tests."""

import os

# Module-level engine in db.connection is built from these on import
os.environ.setdefault("DB_TYPE", "sqlite")
os.environ.setdefault("SQLITE_PATH", ":memory:")
os.environ.setdefault("AUTO_CREATE_SCHEMA", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from finance_ledger.app import app as api_app
from finance_ledger.config import Settings
from finance_ledger.db.connection import enable_sqlite_foreign_keys, get_db
from finance_ledger.init_db import init_db
from finance_ledger.services.base import Services
from finance_ledger.web.api_client import ApiClient
from finance_ledger.web.app import create_web_app


@pytest.fixture
def test_settings():
    """Settings for an in-memory SQLite database.

    Returns:
        Settings: Test configuration object.
    """
    return Settings(
        environment="test",
        db_type="sqlite",
        sqlite_path=":memory:",
        log_level="DEBUG",
        base_asset="USD",
        auto_create_schema=False,
        api_base_url="http://testserver",
    )


@pytest.fixture
def test_engine():
    """Create an in-memory SQLite engine with the ledger schema.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.

    Yields:
        Engine: Engine with all tables created.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    init_db(engine, seed=False)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(test_engine):
    """Session bound to the test engine."""
    session = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)()
    yield session
    session.close()


@pytest.fixture
def services(db_session, test_settings):
    """Create a Services container with test database.

    Args:
        db_session: Session on the in-memory database.
        test_settings: Test configuration fixture.

    Returns:
        Services: Services container for testing.
    """
    return Services(db_session, settings=test_settings)


@pytest.fixture
def api_client(db_session):
    """TestClient for the REST API with get_db pointed at the test session."""

    def override_get_db():
        yield db_session

    api_app.dependency_overrides[get_db] = override_get_db
    client = TestClient(api_app)
    yield client
    api_app.dependency_overrides.clear()


@pytest.fixture
def web_client(api_client, test_settings):
    """TestClient for the web frontend, talking to the API through api_client."""
    web_app = create_web_app(test_settings, api=ApiClient(client=api_client))
    return TestClient(web_app)
