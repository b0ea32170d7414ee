"""
Database repository layer using SQLModel.

Each module provides async data access operations for its table. Repositories
never commit: the caller owns the session and the transaction boundary.

Modules:
- base: AsyncBaseRepository and AsyncQueryBuilder utilities
- users: user account operations
- customers: customer lookup and search
- invoices: invoice listing, search, counts and status totals
- revenue: monthly revenue operations
"""

from .base import AsyncBaseRepository, AsyncQueryBuilder
from .customers import CustomerRepository
from .invoices import InvoiceRepository
from .revenue import RevenueRepository
from .users import UserRepository

__all__ = [
    "AsyncBaseRepository",
    "AsyncQueryBuilder",
    "CustomerRepository",
    "InvoiceRepository",
    "RevenueRepository",
    "UserRepository",
]
