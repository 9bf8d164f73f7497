"""
Database Connection Module
Handles the database connection using the SQLAlchemy async engine.

The engine and session factory are built once in the application lifespan
and stored on ``app.state.database``; request handlers receive a session
through the ``get_db`` dependency.
"""

import logging
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.config import Settings

logger = logging.getLogger(__name__)


# Base class for all our models
class Base(DeclarativeBase):
    pass


class Database:
    """Owns the async engine and the session factory for one process."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.session_maker = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False  # Objects remain accessible after commit
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        options = {"echo": settings.database_echo}
        if not settings.database_url.startswith("sqlite"):
            options.update(pool_size=5, max_overflow=10)
        return cls(create_async_engine(settings.database_url, **options))

    async def init_db(self) -> None:
        """
        Create all tables in database.
        Called once at application startup.
        """
        # Register the mapped classes on Base.metadata
        from app import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("✅ Database tables ready")

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """
    Dependency injection for FastAPI routes.
    Yields a database session, closed when the request ends.
    """
    database: Database = request.app.state.database
    async with database.session_maker() as session:
        yield session
