"""
Database Dependencies.

Provides the session factory used by the dashboard query functions to API endpoints.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from acme_dashboard.core.database.session import get_session_factory

SessionFactoryDep = Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)]
