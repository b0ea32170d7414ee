"""
Invoice I/O models.
"""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class InvoiceCustomer(BaseModel):
    """Customer details embedded in invoice listings."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    email: str
    image_url: str


class LatestInvoice(BaseModel):
    """Entry of the latest invoices widget."""

    id: str
    amount: str = Field(description="Amount formatted as currency, e.g. '$157.95'")
    customer: InvoiceCustomer


class InvoiceTableRow(BaseModel):
    """Row of the paginated invoices table."""

    id: str
    amount: int = Field(description="Amount in cents")
    date: dt.date
    status: str
    customer: InvoiceCustomer


class InvoiceForm(BaseModel):
    """Invoice as loaded into the edit form."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    customer_id: str
    amount: float = Field(description="Amount in dollars")
    status: str
