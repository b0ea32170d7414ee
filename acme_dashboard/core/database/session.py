"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from acme_dashboard.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

engine = create_engine(settings.database_url, echo=settings.database_echo)
async_session_maker = create_sessionmaker(engine)


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Dependency returning the global session factory.

    Query functions open one session per query from this factory.
    """
    return async_session_maker


async def init_db() -> None:
    """
    Initialize the database.

    Creates all dashboard tables if they don't exist.
    NOTE: In production, Alembic migrations should be used instead of this function.
    """
    await create_all(engine)


async def dispose_engine() -> None:
    """Close every pooled connection held by the global engine."""
    await engine.dispose()
