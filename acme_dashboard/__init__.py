"""Acme Dashboard.

Data-access layer and HTTP surface for the Acme invoicing dashboard.

High-level architecture
-----------------------

The package is a thin layer over an async ORM:

- ``acme_dashboard.core.database``: SQLModel entities (users, customers,
  invoices, revenue), async engine/session management, per-table
  repositories and the fixture seeding routine.
- ``acme_dashboard.core.dashboard``: the query functions consumed by the
  dashboard pages. Each one runs a single query, reshapes the result
  (currency formatting, pagination offsets) and re-raises failures as
  ``DashboardDataError`` with a fixed message.
- ``acme_dashboard.server``: the FastAPI application exposing the query
  functions as read-only JSON routes plus the one-shot ``/seed`` endpoint.

Typical workflow
----------------

1. Create the schema (Alembic migration, or ``init_db`` in development).
2. ``GET /seed`` (or ``python -m acme_dashboard.core.database.seed``) to load
   the placeholder data.
3. Pages call ``fetch_*`` functions directly or through ``/api/v1``.
"""
