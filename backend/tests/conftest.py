"""Shared pytest fixtures configured to use a throwaway SQLite database per test."""

import logging
import os
import tempfile
from uuid import uuid4

# must be set before the application modules read their settings
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "noteful-test-logs"))
os.environ["NOTEFUL_SKIP_LIFESPAN_DB"] = "1"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from noteful.core.models import BaseModel
from noteful.database import get_db_session
from noteful.main import app
from noteful.security.jwt import create_access_token

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@pytest.fixture
def db_path(tmp_path):
    """Create the schema in a fresh SQLite file."""
    path = tmp_path / "noteful-test.db"
    engine = create_engine(f"sqlite:///{path}")
    BaseModel.metadata.create_all(engine)
    engine.dispose()
    return path


@pytest.fixture
def session_factory(db_path):
    # NullPool: every session opens its own connection on the current event loop
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def query_db(db_path):
    """Run a scalar SQL query against the test database, bypassing the app."""

    def _query(sql: str, **params):
        engine = create_engine(f"sqlite:///{db_path}")
        try:
            with engine.connect() as conn:
                return conn.execute(text(sql), params).scalar()
        finally:
            engine.dispose()

    return _query


@pytest.fixture
def client(session_factory):
    """Test client whose requests use the per-test database."""

    async def _override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = _override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def bearer_for(user_id) -> dict:
    token = create_access_token({"sub": str(user_id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def owner_id():
    return uuid4()


@pytest.fixture
def auth_headers(owner_id):
    """Bearer headers for the primary test owner."""
    return bearer_for(owner_id)


@pytest.fixture
def other_headers():
    """Bearer headers for a second, unrelated owner."""
    return bearer_for(uuid4())


@pytest.fixture
def user_data():
    return {
        "username": "exampleUser",
        "password": "examplePass",
        "fullname": "Example User",
    }
