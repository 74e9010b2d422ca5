"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory SQLite database sessions, site settings, service mocks
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from tourbook.configs.site import SiteSettings


@pytest.fixture
def site() -> SiteSettings:
    """Site identity used by page composition tests."""
    return SiteSettings(
        url="https://tours.example.com/",
        name="Example Tours",
        short_name="Example",
        destination_name="Fiordland",
        blog_author="Example Team",
        default_tour_image="https://img.example.com/default.jpg",
    )


@pytest.fixture
async def db_engine():
    """
    Create in-memory SQLite async engine with every table created.

    Yields:
        AsyncEngine: Engine with foreign keys enforced
    """
    from tourbook.boundary.db.base import Base
    from tourbook.boundary.db.connection import build_async_engine
    import tourbook.boundary.db.models  # noqa: F401

    engine = build_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine) -> AsyncSession:
    """
    Database session for one test.

    Yields:
        AsyncSession: Session with expire_on_commit and autoflush disabled, like the app's
    """
    factory = async_sessionmaker(
        db_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    async with factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def mock_db() -> AsyncMock:
    """Mock AsyncSession for CRUD calls under unit test."""
    db = AsyncMock(spec=AsyncSession)
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    return db

