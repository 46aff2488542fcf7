"""Async engine and session factory built from identity store settings."""

import logging

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from identity_store_config import Settings, get_settings

logger = logging.getLogger(__name__)


def create_engine_from_settings(settings: Settings | None = None) -> AsyncEngine:
    """Create the async engine for the configured database.

    In-memory SQLite gets a StaticPool so every session sees the same
    database.
    """
    settings = settings or get_settings()
    url = settings.database_url

    if url.startswith("sqlite") and ":memory:" in url:
        return create_async_engine(
            url,
            echo=settings.database_echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

    db_display = url.split("@")[-1] if "@" in url else url
    logger.debug("Creating database engine for %s", db_display)
    return create_async_engine(
        url,
        echo=settings.database_echo,
        pool_pre_ping=settings.database_pool_pre_ping,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
