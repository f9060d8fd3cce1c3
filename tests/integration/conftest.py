"""Integration test fixtures for database and HTTP client operations.

Uses an in-memory SQLite database (aiosqlite) shared by every connection of
one test through a StaticPool. Tables are created from the model metadata.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from src.consultrack.core.db import Database
from src.consultrack.main import create_app
from src.consultrack.models import Project, Visit  # noqa: F401
from src.consultrack.repositories import ProjectRepository, VisitRepository
from src.consultrack.services import ProjectService, VisitService


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create a fresh in-memory database with all tables."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def database(engine: AsyncEngine) -> Database:
    return Database(engine)


@pytest.fixture
async def db_session(database: Database) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for database operations.

    The session does NOT auto-commit. Tests that seed rows directly must call
    ``await session.commit()``.
    """
    async with database.session() as session:
        yield session


@pytest.fixture
def project_service(db_session: AsyncSession) -> ProjectService:
    return ProjectService(ProjectRepository(db_session), db_session)


@pytest.fixture
def visit_service(db_session: AsyncSession) -> VisitService:
    return VisitService(VisitRepository(db_session), db_session)


@pytest.fixture
async def client(database: Database) -> AsyncGenerator[AsyncClient]:
    """HTTP client bound to an app that uses the test database."""
    app = create_app(database=database)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
