"""
Customer entity models.

Customers own zero or more invoices.
"""

from typing import TYPE_CHECKING, List
from uuid import uuid4

from sqlmodel import Field, Relationship

from ..base import Base

if TYPE_CHECKING:
    from .invoices import Invoice


class Customer(Base, table=True):
    """Invoiced customer.

    Table: customers
    """

    __tablename__ = "customers"

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True, max_length=36)
    name: str = Field(max_length=255, index=True)
    email: str = Field(max_length=255)
    image_url: str = Field(max_length=255)

    invoices: List["Invoice"] = Relationship(back_populates="customer")

    def __repr__(self) -> str:
        return f"Customer(id={self.id}, name={self.name})"
