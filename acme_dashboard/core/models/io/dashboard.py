"""
Dashboard overview I/O models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CardData(BaseModel):
    """Figures shown on the dashboard summary cards."""

    number_of_customers: int
    number_of_invoices: int
    total_paid_invoices: str
    total_pending_invoices: str


class RevenueRead(BaseModel):
    """Revenue of one month."""

    model_config = ConfigDict(from_attributes=True)

    month: str
    revenue: int
