"""Database schema utilities for the identity tables."""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

# Import models to register with IdentityBase.metadata
import identity_store.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from identity_store.infrastructure.persistence.sqlalchemy.models.base import (
    IdentityBase,
)

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create the identity tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring identity tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.create_all)

    logger.info("Identity schema is up to date (missing tables created if needed)")


async def drop_tables(engine: AsyncEngine) -> None:
    """
    Drop the identity tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    logger.warning("Dropping identity tables...")

    async with engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.drop_all)

    logger.info("Identity tables dropped successfully")
