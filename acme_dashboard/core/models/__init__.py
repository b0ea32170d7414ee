"""Core models and schemas returned by the dashboard query functions."""

from __future__ import annotations

from .io import (
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

__all__ = [
    "CardData",
    "CustomerField",
    "CustomerTableRow",
    "InvoiceCustomer",
    "InvoiceForm",
    "InvoiceTableRow",
    "LatestInvoice",
    "PendingInvoice",
    "RevenueRead",
]
