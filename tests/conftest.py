"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path

# Always use the SQL store in tests
os.environ["PROFILE_STORE_BACKEND"] = "sqlalchemy"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.entities.profile import ProfileRecord
from infrastructure.database.models import Base
from infrastructure.database.repositories.sqlalchemy_profile_repo import (
    SQLAlchemyProfileRepository,
)
from infrastructure.database.repositories.sqlalchemy_sensor_repo import (
    SQLAlchemySensorRepository,
)

# Test database URL (SQLite in memory, one shared connection)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_USER_ID = "user-jane"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def profile_repo(
    session_factory: async_sessionmaker[AsyncSession],
) -> SQLAlchemyProfileRepository:
    return SQLAlchemyProfileRepository(session_factory)


@pytest.fixture
def sensor_repo(
    session_factory: async_sessionmaker[AsyncSession],
) -> SQLAlchemySensorRepository:
    return SQLAlchemySensorRepository(session_factory)


@pytest.fixture
async def seeded_patient(profile_repo: SQLAlchemyProfileRepository) -> ProfileRecord:
    """Insert a complete patient profile for the test user."""
    return await profile_repo.create(
        ProfileRecord(
            user_id=TEST_USER_ID,
            external_id="P-0042",
            name="Jane Doe",
            email="jane@example.com",
            phone_number="(555) 987-6543",
            address="123 Main St, Springfield",
            weight="70",
            height="175",
        )
    )


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client for the module-level app (no stores)."""
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def api_client(
    profile_repo: SQLAlchemyProfileRepository,
    sensor_repo: SQLAlchemySensorRepository,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client whose app is wired to the in-memory SQLite stores.

    ASGITransport does not run the lifespan, so the stores are injected
    through ``create_app``.
    """
    from main import create_app

    app = create_app(profile_store=profile_repo, sensor_repository=sensor_repo)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
