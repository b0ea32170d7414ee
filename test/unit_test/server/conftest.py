from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator
from unittest.mock import patch

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker


@asynccontextmanager
async def _client_for(factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncClient]:
    """Create an async HTTP client whose endpoints use ``factory`` for database access."""
    from acme_dashboard.core.database.session import get_session_factory
    from acme_dashboard.server.main import app

    app.dependency_overrides[get_session_factory] = lambda: factory

    # Mock the lifespan to prevent database initialization during tests
    async def mock_lifespan(app):
        yield

    try:
        with patch("acme_dashboard.server.main.lifespan", mock_lifespan):
            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
                yield client
    finally:
        app.dependency_overrides.clear()


@pytest_asyncio.fixture(name="client")
async def client_fixture(seeded_session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client over a database loaded with the placeholder data."""
    async with _client_for(seeded_session_factory) as client:
        yield client


@pytest_asyncio.fixture(name="empty_client")
async def empty_client_fixture(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client over a database with empty tables."""
    async with _client_for(session_factory) as client:
        yield client


@pytest_asyncio.fixture(name="broken_client")
async def broken_client_fixture(broken_session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client over a database without tables, so every query fails."""
    async with _client_for(broken_session_factory) as client:
        yield client
