"""
Dashboard query functions.

Each function runs one query (or one fan-out of independent queries) in its
own session, reshapes the rows for the dashboard pages, and reports any
failure as ``DashboardDataError`` with a fixed message after logging the
underlying database error.

All functions accept an optional ``session_factory``; by default they use the
application-wide one from ``acme_dashboard.core.database.session``.
"""

from __future__ import annotations

import asyncio
import math
from typing import Any, Awaitable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from acme_dashboard.core.database import session as db_session
from acme_dashboard.core.database.repositories import (
    CustomerRepository,
    InvoiceRepository,
    RevenueRepository,
)
from acme_dashboard.core.errors import DashboardDataError
from acme_dashboard.core.logging_config import get_logger
from acme_dashboard.core.models import (
    CardData,
    CustomerField,
    CustomerTableRow,
    InvoiceCustomer,
    InvoiceForm,
    InvoiceTableRow,
    LatestInvoice,
    PendingInvoice,
    RevenueRead,
)
from acme_dashboard.core.utils import format_currency

logger = get_logger(__name__)

ITEMS_PER_PAGE = 6
LATEST_INVOICES_LIMIT = 5

SessionFactory = async_sessionmaker[AsyncSession]


def _factory(session_factory: Optional[SessionFactory]) -> SessionFactory:
    return session_factory or db_session.async_session_maker


def page_offset(current_page: int, page_size: int = ITEMS_PER_PAGE) -> int:
    """Rows to skip before ``current_page`` (1-based)."""
    return (current_page - 1) * page_size


def total_pages(count: int, page_size: int = ITEMS_PER_PAGE) -> int:
    """Number of pages needed to show ``count`` rows."""
    return math.ceil(count / page_size)


async def _gather_or_cancel(*coros: Awaitable[Any]) -> List[Any]:
    """Run ``coros`` concurrently; when one fails, cancel the rest and wait for them to finish."""
    tasks = [asyncio.ensure_future(coro) for coro in coros]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def fetch_revenue(session_factory: Optional[SessionFactory] = None) -> List[RevenueRead]:
    """Get the revenue of every month."""
    try:
        async with _factory(session_factory)() as session:
            rows = await RevenueRepository(session).list()
        return [RevenueRead.model_validate(row) for row in rows]
    except Exception as e:
        logger.error(f"Database Error: {e}", exc_info=True)
        raise DashboardDataError("Failed to fetch revenue data.") from e


async def fetch_latest_invoices(session_factory: Optional[SessionFactory] = None) -> List[LatestInvoice]:
    """Get the five most recent invoices with amounts formatted as currency."""
    try:
        async with _factory(session_factory)() as session:
            rows = await InvoiceRepository(session).latest(LATEST_INVOICES_LIMIT)
        return [
            LatestInvoice(
                id=row.id,
                amount=format_currency(row.amount),
                customer=InvoiceCustomer(name=row.name, email=row.email, image_url=row.image_url),
            )
            for row in rows
        ]
    except Exception as e:
        logger.error(f"Database Error: {e}", exc_info=True)
        raise DashboardDataError("Failed to fetch the latest invoices.") from e


async def fetch_card_data(session_factory: Optional[SessionFactory] = None) -> CardData:
    """Get the summary card figures.

    The invoice count, customer count and per-status totals run concurrently,
    each in its own session. When one of them fails the others are cancelled
    before the error is raised.
    """
    factory = _factory(session_factory)

    async def count_invoices() -> int:
        async with factory() as session:
            return await InvoiceRepository(session).count()

    async def count_customers() -> int:
        async with factory() as session:
            return await CustomerRepository(session).count()

    async def status_totals():
        async with factory() as session:
            return await InvoiceRepository(session).status_totals()

    try:
        number_of_invoices, number_of_customers, totals = await _gather_or_cancel(
            count_invoices(), count_customers(), status_totals()
        )
        return CardData(
            number_of_customers=number_of_customers,
            number_of_invoices=number_of_invoices,
            total_paid_invoices=format_currency(totals.paid),
            total_pending_invoices=format_currency(totals.pending),
        )
    except Exception as e:
        logger.error(f"Database Error: {e}", exc_info=True)
        raise DashboardDataError("Failed to fetch card data.") from e


async def fetch_filtered_invoices(
    query: str,
    current_page: int,
    session_factory: Optional[SessionFactory] = None,
) -> List[InvoiceTableRow]:
    """Get one page of invoices matching ``query``, newest first.

    ``query`` is matched case-insensitively against the customer name and
    email, the amount, the date and the status.
    """
    offset = page_offset(current_page)

    try:
        async with _factory(session_factory)() as session:
            rows = await InvoiceRepository(session).search(query, limit=ITEMS_PER_PAGE, offset=offset)
        return [
            InvoiceTableRow(
                id=row.id,
                amount=row.amount,
                date=row.date,
                status=row.status,
                customer=InvoiceCustomer(name=row.name, email=row.email, image_url=row.image_url),
            )
            for row in rows
        ]
    except Exception as e:
        logger.error(f"Database Error: {e}", exc_info=True)
        raise DashboardDataError("Failed to fetch invoices.") from e


async def fetch_invoices_pages(query: str, session_factory: Optional[SessionFactory] = None) -> int:
    """Get the number of invoice table pages for ``query``."""
    try:
        async with _factory(session_factory)() as session:
            count = await InvoiceRepository(session).count_matching(query)
        return total_pages(count)
    except Exception as e:
        logger.error(f"Database Error: {e}", exc_info=True)
        raise DashboardDataError("Failed to fetch total number of invoices.") from e


async def fetch_invoice_by_id(
    invoice_id: str,
    session_factory: Optional[SessionFactory] = None,
) -> Optional[InvoiceForm]:
    """Get an invoice for the edit form, with the amount converted from cents to dollars.

    Returns:
        The invoice, or None when no invoice has this id
    """
    try:
        async with _factory(session_factory)() as session:
            invoice = await InvoiceRepository(session).get_by_id(invoice_id)
        if invoice is None:
            return None
        return InvoiceForm(
            id=invoice.id,
            customer_id=invoice.customer_id,
            amount=invoice.amount / 100,
            status=invoice.status,
        )
    except Exception as e:
        logger.error(f"Database Error: {e}", exc_info=True)
        raise DashboardDataError("Failed to fetch invoice.") from e


async def fetch_customers(session_factory: Optional[SessionFactory] = None) -> List[CustomerField]:
    """Get every customer's id and name, ordered by name."""
    try:
        async with _factory(session_factory)() as session:
            rows = await CustomerRepository(session).list_names()
        return [CustomerField(id=row.id, name=row.name) for row in rows]
    except Exception as e:
        logger.error(f"Database Error: {e}", exc_info=True)
        raise DashboardDataError("Failed to fetch all customers.") from e


async def fetch_filtered_customers(
    query: str,
    session_factory: Optional[SessionFactory] = None,
) -> List[CustomerTableRow]:
    """Get customers whose name or email contains ``query``, each with its pending invoices."""
    try:
        async with _factory(session_factory)() as session:
            customers = await CustomerRepository(session).search(query)
            pending = await InvoiceRepository(session).pending_for_customers([c.id for c in customers])

        pending_by_customer = {}
        for invoice in pending:
            pending_by_customer.setdefault(invoice.customer_id, []).append(PendingInvoice.model_validate(invoice))

        return [
            CustomerTableRow(
                id=customer.id,
                name=customer.name,
                email=customer.email,
                image_url=customer.image_url,
                invoices=pending_by_customer.get(customer.id, []),
            )
            for customer in customers
        ]
    except Exception as e:
        logger.error(f"Database Error: {e}", exc_info=True)
        raise DashboardDataError("Failed to fetch customer table.") from e
