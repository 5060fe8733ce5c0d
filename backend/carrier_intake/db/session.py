"""Database session configuration with async SQLAlchemy."""

import logging
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from carrier_intake.config import settings

logger = logging.getLogger(__name__)


def async_database_url(url: str) -> str:
    """Select the asyncpg driver for plain ``postgresql://`` URLs."""
    for prefix in ("postgresql://", "postgres://"):
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix):]
    return url


# Create async engine; connections are opened lazily on first use
engine = create_async_engine(
    async_database_url(settings.DATABASE_URL),
    echo=settings.LOG_LEVEL.upper() == "DEBUG",
    pool_pre_ping=True,
    poolclass=NullPool if settings.ENVIRONMENT == "test" else None,
)

# Create session factory
SessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for getting async database sessions.

    Commits when the request handler returns and rolls back if it raises.

    Yields:
        AsyncSession: Database session
    """
    async with SessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def dispose_engine() -> None:
    """Close pooled connections on application shutdown."""
    await engine.dispose()
    logger.info("Database engine disposed")
