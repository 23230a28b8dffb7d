"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, user_documents.configs
System role: Database schema initialization

Usage:
    python -m user_documents.boundary.db.create_tables
"""

import asyncio
import logging

from user_documents.boundary.db.base import Base
from user_documents.boundary.db.connection import dispose_async_engine, get_async_engine

# Import all models to register them with Base.metadata
from user_documents.boundary.db.models.user_model import UserModel  # noqa: F401
from user_documents.boundary.db.models.document_model import DocumentModel  # noqa: F401
from user_documents.observability.logger import configure_logging

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables created: %s", ", ".join(Base.metadata.tables))


async def drop_all_tables() -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Raises:
        SQLAlchemyError: If database connection fails or drop fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("All tables dropped")


async def _main() -> None:
    configure_logging()
    try:
        await create_all_tables()
    finally:
        await dispose_async_engine()


if __name__ == "__main__":
    asyncio.run(_main())
