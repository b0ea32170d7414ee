"""
Centralized database layer for Acme Dashboard.

Structure:
- entities/: SQLModel table models (users, customers, invoices, revenue)
- repositories/: Data access layer organized by table
- placeholder_data.py: Fixture rows loaded by the seeding routine
- seed.py: Transactional seeding routine and CLI entry point
- session.py: Global engine and session factory management
- utils.py: Database utility functions (engine, session factory, create_all)
"""

from .base import Base
from .session import (
    async_session_maker,
    dispose_engine,
    engine,
    get_session_factory,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    normalize_database_url,
)

__all__ = [
    "Base",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "dispose_engine",
    "engine",
    "get_session_factory",
    "init_db",
    "normalize_database_url",
]
