"""
Customer repository.

Provides the customer picker listing and the case-insensitive customer search
used by the customers table.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from sqlalchemy import or_
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.customers import Customer
from .base import AsyncBaseRepository, AsyncQueryBuilder


class CustomerRepository(AsyncBaseRepository[Customer]):
    """Repository for customer data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Customer)

    async def list_names(self) -> Sequence[Row[Any]]:
        """Get ``(id, name)`` of every customer ordered by name ascending."""
        stmt = select(Customer.id, Customer.name).order_by(Customer.name.asc())
        result = await self.session.execute(stmt)
        return result.all()

    async def search(self, query: str) -> List[Customer]:
        """Get customers whose name or email contains ``query``, ignoring case.

        Args:
            query: Search text; an empty string matches every customer

        Returns:
            Matching customers ordered by name
        """
        pattern = AsyncQueryBuilder.contains_pattern(query)
        stmt = (
            select(Customer)
            .where(or_(Customer.name.ilike(pattern), Customer.email.ilike(pattern)))
            .order_by(Customer.name.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
