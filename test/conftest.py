from __future__ import annotations

import os
from pathlib import Path
from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

# The global engine is built from settings at import time; point it at SQLite
# before anything from acme_dashboard is imported.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DASHBOARD_ENABLE_FILE_LOGGING", "false")

from acme_dashboard.core.database.seed import seed_database  # noqa: E402
from acme_dashboard.core.database.utils import (  # noqa: E402
    create_all,
    create_engine,
    create_sessionmaker,
)


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    """File-backed SQLite database, isolated per test.

    A file rather than ``:memory:`` so that concurrent sessions each get their
    own connection to the same data.
    """
    return f"sqlite+aiosqlite:///{tmp_path / 'dashboard.db'}"


@pytest.fixture
async def engine(database_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """Engine with every dashboard table created."""
    engine = create_engine(database_url)
    await create_all(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(engine)


@pytest.fixture
async def seeded_session_factory(session_factory: async_sessionmaker[AsyncSession]) -> async_sessionmaker[AsyncSession]:
    """Session factory over a database loaded with the placeholder data."""
    await seed_database(session_factory)
    return session_factory


@pytest.fixture
async def broken_session_factory(database_url: str) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Session factory over a database without any table, so every query fails."""
    engine = create_engine(database_url)
    try:
        yield create_sessionmaker(engine)
    finally:
        await engine.dispose()
