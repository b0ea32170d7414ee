"""
Invoice repository.

Invoice listings are joined with their customer so that the dashboard can show
who was billed without a second round trip. The free-text search matches the
customer name and email, the amount, the date and the status.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from sqlalchemy import String, case, cast, func, or_
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.customers import Customer
from ..entities.invoices import Invoice, InvoiceStatus
from .base import AsyncBaseRepository, AsyncQueryBuilder


def invoice_search_clause(query: str):
    """Build the WHERE clause matching ``query`` against an invoice and its customer."""
    pattern = AsyncQueryBuilder.contains_pattern(query)
    return or_(
        Customer.name.ilike(pattern),
        Customer.email.ilike(pattern),
        cast(Invoice.amount, String).ilike(pattern),
        cast(Invoice.date, String).ilike(pattern),
        Invoice.status.ilike(pattern),
    )


class InvoiceRepository(AsyncBaseRepository[Invoice]):
    """Repository for invoice data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Invoice)

    async def latest(self, limit: int) -> Sequence[Row[Any]]:
        """Get the most recent invoices with their customer details.

        Args:
            limit: Maximum number of invoices to return

        Returns:
            Rows of ``(id, amount, name, image_url, email)`` ordered by date descending
        """
        stmt = (
            select(Invoice.id, Invoice.amount, Customer.name, Customer.image_url, Customer.email)
            .join(Customer, Invoice.customer_id == Customer.id)
            .order_by(Invoice.date.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return result.all()

    async def search(self, query: str, limit: Optional[int] = None, offset: Optional[int] = None) -> Sequence[Row[Any]]:
        """Get one page of invoices matching ``query``.

        Args:
            query: Search text; an empty string matches every invoice
            limit: Page size
            offset: Rows to skip

        Returns:
            Rows of ``(id, amount, date, status, name, email, image_url)`` ordered by date descending
        """
        stmt = (
            select(
                Invoice.id,
                Invoice.amount,
                Invoice.date,
                Invoice.status,
                Customer.name,
                Customer.email,
                Customer.image_url,
            )
            .join(Customer, Invoice.customer_id == Customer.id)
            .where(invoice_search_clause(query))
            .order_by(Invoice.date.desc())
        )
        stmt = AsyncQueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return result.all()

    async def count_matching(self, query: str) -> int:
        """Count invoices matching ``query`` with the same clause as :meth:`search`."""
        stmt = (
            select(func.count())
            .select_from(Invoice)
            .join(Customer, Invoice.customer_id == Customer.id)
            .where(invoice_search_clause(query))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def status_totals(self) -> Row[Any]:
        """Sum invoice amounts per status.

        Returns:
            Row with ``paid`` and ``pending`` sums in cents; both are ``None`` on an empty table
        """
        stmt = select(
            func.sum(case((Invoice.status == InvoiceStatus.PAID.value, Invoice.amount), else_=0)).label("paid"),
            func.sum(case((Invoice.status == InvoiceStatus.PENDING.value, Invoice.amount), else_=0)).label("pending"),
        )
        result = await self.session.execute(stmt)
        return result.one()

    async def pending_for_customers(self, customer_ids: Sequence[str]) -> List[Invoice]:
        """Get the pending invoices of the given customers, newest first."""
        if not customer_ids:
            return []
        stmt = (
            select(Invoice)
            .where(Invoice.customer_id.in_(customer_ids), Invoice.status == InvoiceStatus.PENDING.value)
            .order_by(Invoice.date.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
