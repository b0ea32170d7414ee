"""
Unit tests for the table repositories.

Covers the shared base repository operations and the dashboard-specific
queries of the invoice and customer repositories.
"""

import datetime as dt

import pytest

from acme_dashboard.core.database.entities import Customer, Invoice, Revenue, User
from acme_dashboard.core.database.repositories import (
    AsyncQueryBuilder,
    CustomerRepository,
    InvoiceRepository,
    RevenueRepository,
    UserRepository,
)


async def _add_customer_with_invoices(session, customer_id, name, invoices):
    session.add(Customer(id=customer_id, name=name, email=f"{customer_id}@example.com", image_url=f"/{customer_id}.png"))
    for amount, status, date in invoices:
        session.add(Invoice(customer_id=customer_id, amount=amount, status=status, date=date))
    await session.commit()


class TestAsyncBaseRepository:
    async def test_create_flushes_generated_id(self, session_factory):
        async with session_factory() as session:
            await _add_customer_with_invoices(session, "c1", "Ada", [])
            invoice = await InvoiceRepository(session).create(
                Invoice(customer_id="c1", amount=100, status="paid", date=dt.date(2024, 1, 1))
            )
            assert invoice.id is not None
            await session.commit()

        async with session_factory() as session:
            assert await InvoiceRepository(session).get_by_id(invoice.id) is not None

    async def test_create_if_absent_keeps_existing_row(self, session_factory):
        async with session_factory() as session:
            repo = RevenueRepository(session)
            await repo.create_if_absent(Revenue(month="Jan", revenue=2000), "Jan")
            existing = await repo.create_if_absent(Revenue(month="Jan", revenue=9999), "Jan")
            await session.commit()

        assert existing.revenue == 2000

        async with session_factory() as session:
            assert await RevenueRepository(session).count() == 1

    async def test_get_by_id_missing(self, session_factory):
        async with session_factory() as session:
            assert await CustomerRepository(session).get_by_id("missing") is None

    async def test_list_with_pagination(self, seeded_session_factory):
        async with seeded_session_factory() as session:
            repo = InvoiceRepository(session)
            everything = await repo.list()
            first_two = await repo.list(limit=2)
            rest = await repo.list(offset=2)

        assert len(everything) == 13
        assert len(first_two) == 2
        assert len(rest) == 11

    async def test_count_empty_table(self, session_factory):
        async with session_factory() as session:
            assert await UserRepository(session).count() == 0


class TestAsyncQueryBuilder:
    def test_contains_pattern(self):
        assert AsyncQueryBuilder.contains_pattern("abc") == "%abc%"
        assert AsyncQueryBuilder.contains_pattern("") == "%%"


class TestUserRepository:
    async def test_get_by_email(self, seeded_session_factory):
        async with seeded_session_factory() as session:
            repo = UserRepository(session)
            user = await repo.get_by_email("user@nextmail.com")
            missing = await repo.get_by_email("nobody@nextmail.com")

        assert user is not None
        assert user.name == "User"
        assert missing is None

    async def test_email_is_unique(self, session_factory):
        from sqlalchemy.exc import IntegrityError

        async with session_factory() as session:
            session.add(User(name="A", email="same@example.com", password="x"))
            session.add(User(name="B", email="same@example.com", password="y"))
            with pytest.raises(IntegrityError):
                await session.commit()


class TestInvoiceRepository:
    async def test_latest_orders_by_date_descending(self, session_factory):
        async with session_factory() as session:
            await _add_customer_with_invoices(
                session,
                "c1",
                "Ada",
                [
                    (100, "paid", dt.date(2024, 1, 1)),
                    (200, "pending", dt.date(2024, 3, 1)),
                    (300, "paid", dt.date(2024, 2, 1)),
                ],
            )
            rows = await InvoiceRepository(session).latest(2)

        assert [row.amount for row in rows] == [200, 300]
        assert rows[0].name == "Ada"
        assert rows[0].email == "c1@example.com"
        assert rows[0].image_url == "/c1.png"

    async def test_search_and_count_agree(self, seeded_session_factory):
        async with seeded_session_factory() as session:
            repo = InvoiceRepository(session)
            for query in ["", "paid", "Lee", "2022-", "500"]:
                rows = await repo.search(query)
                assert len(rows) == await repo.count_matching(query)

    async def test_search_pagination(self, seeded_session_factory):
        async with seeded_session_factory() as session:
            repo = InvoiceRepository(session)
            everything = await repo.search("")
            second_page = await repo.search("", limit=6, offset=6)

        assert [row.id for row in second_page] == [row.id for row in everything[6:12]]

    async def test_status_totals(self, seeded_session_factory):
        async with seeded_session_factory() as session:
            totals = await InvoiceRepository(session).status_totals()

        assert totals.paid == 100626
        assert totals.pending == 125632

    async def test_status_totals_empty_table(self, session_factory):
        async with session_factory() as session:
            totals = await InvoiceRepository(session).status_totals()

        assert totals.paid is None
        assert totals.pending is None

    async def test_pending_for_customers(self, session_factory):
        async with session_factory() as session:
            await _add_customer_with_invoices(
                session,
                "c1",
                "Ada",
                [
                    (100, "pending", dt.date(2024, 1, 1)),
                    (200, "paid", dt.date(2024, 2, 1)),
                    (300, "pending", dt.date(2024, 3, 1)),
                ],
            )
            await _add_customer_with_invoices(session, "c2", "Bob", [(400, "pending", dt.date(2024, 4, 1))])
            pending = await InvoiceRepository(session).pending_for_customers(["c1"])

        assert [invoice.amount for invoice in pending] == [300, 100]

    async def test_pending_for_no_customers(self, session_factory):
        async with session_factory() as session:
            assert await InvoiceRepository(session).pending_for_customers([]) == []


class TestCustomerRepository:
    async def test_list_names_sorted(self, seeded_session_factory):
        async with seeded_session_factory() as session:
            rows = await CustomerRepository(session).list_names()

        assert [row.name for row in rows] == [
            "Amy Burns",
            "Balazs Orban",
            "Delba de Oliveira",
            "Evil Rabbit",
            "Lee Robinson",
            "Michael Novotny",
        ]

    async def test_search_by_name_or_email(self, seeded_session_factory):
        async with seeded_session_factory() as session:
            repo = CustomerRepository(session)
            by_name = await repo.search("ROBINSON")
            by_email = await repo.search("novotny.com")
            nothing = await repo.search("zzz")

        assert [c.name for c in by_name] == ["Lee Robinson"]
        assert [c.name for c in by_email] == ["Michael Novotny"]
        assert nothing == []
