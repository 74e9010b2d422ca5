"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, tourbook.configs
System role: Database schema initialization

Usage:
    tourbook-create-tables  (or python -m tourbook.boundary.db.create_tables)
"""

import asyncio
import logging

from tourbook.boundary.db.base import Base
from tourbook.boundary.db.connection import dispose_engine, get_async_engine

# Import all models to register them with Base.metadata
import tourbook.boundary.db.models  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails

    Usage:
        python -m tourbook.boundary.db.create_tables
        # Or in code:
        await create_all_tables()
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("All tables created", extra={"tables": sorted(Base.metadata.tables)})


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
    try:
        await create_all_tables()
    finally:
        await dispose_engine()


def main() -> None:
    """Entry point for the ``tourbook-create-tables`` command."""
    from tourbook.observability import configure_logging

    configure_logging()
    asyncio.run(_main())


if __name__ == "__main__":
    main()
