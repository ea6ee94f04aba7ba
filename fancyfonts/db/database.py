"""
Database engine and session management.

Provides the async SQLAlchemy engine and session factory shared by the
API and the CLI. Only preferences (favorites, decorator choice) are
persisted; the font catalog itself is static data.
"""

import logging
from collections.abc import AsyncGenerator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from fancyfonts.config import settings
from fancyfonts.models.db import Base

logger = logging.getLogger(__name__)

engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def commit_or_rollback(session: AsyncSession) -> bool:
    """
    Commit pending preference writes.

    A failed commit is rolled back and logged rather than raised; preferences
    are best-effort and losing one write must not fail the caller.

    Returns:
        True if the commit succeeded.
    """
    try:
        await session.commit()
    except SQLAlchemyError as e:
        await session.rollback()
        logger.warning("Could not commit preference changes: %s", e)
        return False
    return True


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides a database session.

    Commits when the request handler returns, rolls back on database errors
    raised by the handler.
    """
    async with async_session_factory() as session:
        try:
            yield session
        except SQLAlchemyError:
            await session.rollback()
            raise
        await commit_or_rollback(session)


async def init_db() -> None:
    """
    Create the preference tables.

    Called once at application startup and before CLI commands that
    touch preferences.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
