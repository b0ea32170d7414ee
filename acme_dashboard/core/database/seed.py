"""
Database seeding routine.

Loads the placeholder users, customers, invoices and revenue inside a single
transaction: either every table is seeded or nothing is written.

Users, customers and revenue are inserted only when their primary key is not
present yet, so re-running the seed leaves them unchanged. Invoices have no
natural key and are always inserted, so each run appends another copy.

Run from the command line with::

    python -m acme_dashboard.core.database.seed [--create-tables]
"""

from __future__ import annotations

import argparse
import asyncio
import datetime as dt
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from acme_dashboard.core.logging_config import get_logger, setup_logging
from acme_dashboard.core.security import hash_password

from . import placeholder_data
from . import session as db_session
from .entities import Customer, Invoice, Revenue, User
from .repositories import CustomerRepository, InvoiceRepository, RevenueRepository, UserRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class SeedSummary:
    """Number of rows returned by each seeding step."""

    users: int
    customers: int
    invoices: int
    revenue: int


async def seed_users(session: AsyncSession, rows: Optional[Sequence[Dict[str, Any]]] = None) -> List[User]:
    """Hash the fixture passwords and insert users missing by id.

    Hashing runs on worker threads concurrently; inserts share the caller's session.
    """
    rows = placeholder_data.users if rows is None else rows
    hashed_passwords = await asyncio.gather(*(asyncio.to_thread(hash_password, row["password"]) for row in rows))

    repo = UserRepository(session)
    inserted = []
    for row, hashed in zip(rows, hashed_passwords):
        user = User(id=row["id"], name=row["name"], email=row["email"], password=hashed)
        inserted.append(await repo.create_if_absent(user, row["id"]))
    return inserted


async def seed_customers(session: AsyncSession, rows: Optional[Sequence[Dict[str, Any]]] = None) -> List[Customer]:
    """Insert customers missing by id."""
    rows = placeholder_data.customers if rows is None else rows
    repo = CustomerRepository(session)
    inserted = []
    for row in rows:
        customer = Customer(id=row["id"], name=row["name"], email=row["email"], image_url=row["image_url"])
        inserted.append(await repo.create_if_absent(customer, row["id"]))
    return inserted


async def seed_invoices(session: AsyncSession, rows: Optional[Sequence[Dict[str, Any]]] = None) -> List[Invoice]:
    """Insert every fixture invoice with a freshly generated id."""
    rows = placeholder_data.invoices if rows is None else rows
    repo = InvoiceRepository(session)
    inserted = []
    for row in rows:
        invoice = Invoice(
            customer_id=row["customer_id"],
            amount=row["amount"],
            status=row["status"],
            date=dt.date.fromisoformat(row["date"]),
        )
        inserted.append(await repo.create(invoice))
    return inserted


async def seed_revenue(session: AsyncSession, rows: Optional[Sequence[Dict[str, Any]]] = None) -> List[Revenue]:
    """Insert revenue months missing by month label."""
    rows = placeholder_data.revenue if rows is None else rows
    repo = RevenueRepository(session)
    inserted = []
    for row in rows:
        revenue = Revenue(month=row["month"], revenue=row["revenue"])
        inserted.append(await repo.create_if_absent(revenue, row["month"]))
    return inserted


async def seed_database(session_factory: Optional[async_sessionmaker[AsyncSession]] = None) -> SeedSummary:
    """Seed every table inside one transaction.

    Args:
        session_factory: Session factory to use; defaults to the global one

    Returns:
        Row counts per table touched by this run

    Raises:
        Any database or hashing error; the transaction is rolled back first.
    """
    factory = session_factory or db_session.async_session_maker
    async with factory() as session:
        async with session.begin():
            users = await seed_users(session)
            customers = await seed_customers(session)
            invoices = await seed_invoices(session)
            revenue = await seed_revenue(session)

    summary = SeedSummary(users=len(users), customers=len(customers), invoices=len(invoices), revenue=len(revenue))
    logger.info(f"Database seeded: {summary}")
    return summary


async def _run(create_tables: bool) -> None:
    try:
        if create_tables:
            await db_session.init_db()
        await seed_database()
    finally:
        await db_session.dispose_engine()


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Seed the Acme dashboard database with placeholder data.")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before seeding (development only; use Alembic in production).",
    )
    args = parser.parse_args(argv)

    setup_logging()
    asyncio.run(_run(args.create_tables))


if __name__ == "__main__":
    main()
