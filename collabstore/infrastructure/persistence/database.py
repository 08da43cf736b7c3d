"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

Schema is managed by Alembic migrations (see migrations/versions). The
engine is a long-lived shared handle: build one RecordDatabase at startup,
hand it to every record repository, and close it at shutdown.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from collabstore.core.config import Settings
from collabstore.domain.exceptions import InvalidDatabaseError, NoPoolError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Create the pooled async engine (pool and driver overrides from settings)."""
    pool_size = settings.db_pool_size if settings.db_pool_size is not None else 20
    max_overflow = (
        settings.db_max_overflow if settings.db_max_overflow is not None else 30
    )
    command_timeout = (
        settings.db_command_timeout
        if settings.db_command_timeout is not None
        else 60
    )
    connect_args: dict[str, Any] = {}
    if "postgresql" in settings.database_url:
        connect_args["command_timeout"] = command_timeout
    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_recycle=3600,
        connect_args=connect_args,
    )


class RecordDatabase:
    """Shared record-store handle: engine plus session factory."""

    def __init__(self, engine: AsyncEngine | None) -> None:
        """Wrap an engine.

        Raises:
            NoPoolError: If engine is None.
        """
        if engine is None:
            raise NoPoolError()
        self.engine = engine
        self.sessionmaker = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "RecordDatabase":
        return cls(create_engine_from_settings(settings))

    async def ping(self) -> None:
        """Check connectivity.

        Raises:
            InvalidDatabaseError: If the database cannot be reached.
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise InvalidDatabaseError(str(e)) from e
        logger.info("Record store connected")

    async def close(self) -> None:
        await self.engine.dispose()
        logger.info("Record store disconnected")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session for reads. Does not commit."""
        async with self.sessionmaker() as session:
            yield session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncSession]:
        """Yield a session inside a transaction; commits on success, rolls back on error."""
        async with self.sessionmaker.begin() as session:
            yield session
