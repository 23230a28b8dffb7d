"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory async database, seeded users, mocked sessions
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from datetime import date
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from user_documents.boundary.db.base import Base
    from user_documents.boundary.db import models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def seeded_users(test_async_db: AsyncSession) -> dict:
    """
    Insert a manager, a requester reporting to them, and a travel admin.

    Returns:
        dict: UserModel instances keyed by "manager", "requester", "admin"
    """
    from user_documents.boundary.db.models import UserModel, UserRole

    manager = UserModel(
        email="manager@example.com",
        password="hashed-manager",
        first_name="Maya",
        last_name="Okafor",
        role=UserRole.MANAGER.value,
        department="Operations",
        is_verified=True,
    )
    test_async_db.add(manager)
    await test_async_db.flush()

    requester = UserModel(
        email="requester@example.com",
        password="hashed-requester",
        first_name="Rui",
        last_name="Santos",
        birth_date=date(1990, 4, 12),
        role=UserRole.REQUESTER.value,
        profile_picture="http://cdn.example.com/rui.png",
        line_manager_id=manager.id,
    )
    admin = UserModel(
        email="admin@example.com",
        password="hashed-admin",
        first_name="Ada",
        last_name="Lind",
        role=UserRole.TRAVEL_ADMIN.value,
    )
    test_async_db.add_all([requester, admin])
    await test_async_db.flush()

    return {"manager": manager, "requester": requester, "admin": admin}


@pytest.fixture
def mock_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)
