"""Integration test fixtures for database and HTTP client operations.

Runs the full app against an in-memory SQLite database shared through a
single connection. Foreign keys are switched on per connection so the
ON DELETE CASCADE behaviour matches PostgreSQL.
Uses polyfactory for type-safe test data generation.
"""

from collections.abc import AsyncGenerator
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from src.app.core import db
from src.app.core.identity import get_identity_provider
from src.app.core.llm import get_llm_client
from src.app.main import create_app
from src.app.models import Issue, Project, Report  # noqa: F401
from tests.helpers import FakeIdentityProvider

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create a fresh in-memory database with all tables, installed as the app engine."""
    await db.dispose_engine()

    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    event.listen(test_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    db.set_engine(test_engine)
    yield test_engine
    db.set_engine(None)
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for direct database assertions.

    The session does NOT auto-commit; call `await session.commit()` to
    persist rows created in a test.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def app(
    engine: AsyncEngine,
    identity_provider: FakeIdentityProvider,
    fake_llm: MagicMock,
) -> FastAPI:
    """App wired to the test database, fake identity provider and fake LLM."""
    application = create_app()
    application.dependency_overrides[get_identity_provider] = lambda: identity_provider
    application.dependency_overrides[get_llm_client] = lambda: fake_llm
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """HTTP client bound to the test app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
