"""Integration test fixtures.

Repository tests run against a real SQLite database file (a file, not
:memory:, so two sessions can hold separate connections). API tests run
the real FastAPI app with the real PBKDF2 hasher and in-memory storage.
"""

from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from account_auth.infrastructure.config.settings import Settings
from account_auth.infrastructure.persistence.database import (
    create_database_engine,
    create_session_factory,
    create_tables,
)
from account_auth.main import app
from account_auth.presentation.dependencies import get_uow_factory
from tests.fakes.unit_of_work_fake import FakeUnitOfWork


@pytest_asyncio.fixture
async def test_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Create a test database engine on a fresh SQLite file."""
    settings = Settings(
        database_url_override=f"sqlite+aiosqlite:///{tmp_path / 'accounts.db'}",
        environment="test",
    )
    engine = create_database_engine(settings)
    await create_tables(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a test session factory."""
    return create_session_factory(test_engine)


@pytest.fixture
def api_uow() -> FakeUnitOfWork:
    """Storage behind the HTTP app for one test."""
    return FakeUnitOfWork()


@pytest.fixture
def client(api_uow) -> Generator[TestClient, None, None]:
    """
    Create a FastAPI test client.

    Storage is swapped for FakeUnitOfWork; the credential hasher is the
    real PBKDF2 one built from default settings.
    """
    app.dependency_overrides[get_uow_factory] = lambda: lambda: api_uow

    yield TestClient(app)

    app.dependency_overrides.clear()
