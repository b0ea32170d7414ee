"""
Customer Endpoints.

Provides the customer picker list and the searchable customers table.
"""

from fastapi import APIRouter

from acme_dashboard.core import dashboard
from acme_dashboard.core.models import CustomerField, CustomerTableRow

from ...services.deps import SessionFactoryDep

router = APIRouter()


@router.get(
    "",
    response_model=list[CustomerField],
    summary="List Customers",
    description="Retrieve the id and name of every customer, ordered by name.",
    responses={500: {"description": "Failed to fetch all customers."}},
)
async def list_customers(session_factory: SessionFactoryDep) -> list[CustomerField]:
    return await dashboard.fetch_customers(session_factory)


@router.get(
    "/filtered",
    response_model=list[CustomerTableRow],
    summary="Search Customers",
    description="Retrieve customers whose name or email contains the query, with their pending invoices.",
    responses={500: {"description": "Failed to fetch customer table."}},
)
async def search_customers(session_factory: SessionFactoryDep, query: str = "") -> list[CustomerTableRow]:
    """
    Search customers.

    - **query**: Case-insensitive text matched against name and email. Empty matches everyone.
    """
    return await dashboard.fetch_filtered_customers(query, session_factory)
