"""
Invoice entity models.

Amounts are stored as integer cents; the dashboard converts them for display.
"""

import datetime as dt
from enum import Enum
from typing import TYPE_CHECKING, Optional
from uuid import uuid4

from sqlmodel import Field, Relationship

from ..base import Base

if TYPE_CHECKING:
    from .customers import Customer


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


class Invoice(Base, table=True):
    """Customer invoice.

    Table: invoices
    """

    __tablename__ = "invoices"

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True, max_length=36)
    customer_id: str = Field(foreign_key="customers.id", max_length=36, index=True)
    amount: int = Field(description="Amount in cents")
    status: str = Field(max_length=32, index=True, description="'pending' or 'paid'")
    date: dt.date = Field(index=True)

    customer: Optional["Customer"] = Relationship(back_populates="invoices")

    def __repr__(self) -> str:
        return f"Invoice(id={self.id}, customer_id={self.customer_id}, amount={self.amount}, status={self.status})"
