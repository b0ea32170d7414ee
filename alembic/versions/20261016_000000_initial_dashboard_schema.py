"""Initial schema for the Acme dashboard

Revision ID: 20261016_000000
Revises: None
Create Date: 2026-10-16 00:00:00.000000

Creates the users, customers, invoices and revenue tables. Fixture data is not
part of the migration; load it with the /seed endpoint or
``python -m acme_dashboard.core.database.seed``.

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261016_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all dashboard tables."""

    op.create_table(
        "users",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
        sa.Index("ix_users_email", "email"),
    )

    op.create_table(
        "customers",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("image_url", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_customers_name", "name"),
    )

    op.create_table(
        "invoices",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("customer_id", sa.String(36), nullable=False),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(32), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["customer_id"], ["customers.id"]),
        sa.Index("ix_invoices_customer_id", "customer_id"),
        sa.Index("ix_invoices_status", "status"),
        sa.Index("ix_invoices_date", "date"),
    )

    op.create_table(
        "revenue",
        sa.Column("month", sa.String(4), nullable=False),
        sa.Column("revenue", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("month"),
    )


def downgrade() -> None:
    """Drop all tables created in upgrade."""
    op.drop_table("revenue")
    op.drop_table("invoices")
    op.drop_table("customers")
    op.drop_table("users")
