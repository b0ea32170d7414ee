"""
I/O models for query results and API responses.

These models are separate from database entities so that the shapes the
dashboard pages consume can evolve independently of the schema.

Modules:
- invoices: invoice listings, invoice form and the embedded customer summary
- customers: customer picker and customers table rows
- dashboard: summary cards and revenue chart data
"""

from .customers import CustomerField, CustomerTableRow, PendingInvoice
from .dashboard import CardData, RevenueRead
from .invoices import InvoiceCustomer, InvoiceForm, InvoiceTableRow, LatestInvoice

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
