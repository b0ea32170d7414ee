"""
Revenue repository.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.revenue import Revenue
from .base import AsyncBaseRepository


class RevenueRepository(AsyncBaseRepository[Revenue]):
    """Repository for monthly revenue rows, keyed by month."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Revenue)
