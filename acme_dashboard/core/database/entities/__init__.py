"""
Database entity models.

Each module maps one table of the dashboard schema:

- users: dashboard login accounts
- customers: invoiced customers
- invoices: invoices, amounts stored in cents
- revenue: monthly revenue figures
"""

from .customers import Customer
from .invoices import Invoice, InvoiceStatus
from .revenue import Revenue
from .users import User

__all__ = [
    "Customer",
    "Invoice",
    "InvoiceStatus",
    "Revenue",
    "User",
]
