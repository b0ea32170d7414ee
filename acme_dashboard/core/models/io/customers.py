"""
Customer I/O models.
"""

from __future__ import annotations

import datetime as dt
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CustomerField(BaseModel):
    """Customer option for the invoice form picker."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class PendingInvoice(BaseModel):
    """Pending invoice listed under a customer."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    amount: int = Field(description="Amount in cents")
    date: dt.date
    status: str


class CustomerTableRow(BaseModel):
    """Row of the customers table."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    image_url: str
    invoices: List[PendingInvoice] = Field(default_factory=list, description="Pending invoices only")
