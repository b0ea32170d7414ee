"""
Invoice Endpoints.

Provides the latest invoices widget, the searchable and paginated invoices
table, its page count, and single invoice lookup for the edit form.
"""

from fastapi import APIRouter, HTTPException, Query, status

from acme_dashboard.core import dashboard
from acme_dashboard.core.logging_config import get_logger
from acme_dashboard.core.models import InvoiceForm, InvoiceTableRow, LatestInvoice

from ...services.deps import SessionFactoryDep

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/latest",
    response_model=list[LatestInvoice],
    summary="Latest Invoices",
    description="Retrieve the five most recent invoices with amounts formatted as currency.",
    responses={500: {"description": "Failed to fetch the latest invoices."}},
)
async def latest_invoices(session_factory: SessionFactoryDep) -> list[LatestInvoice]:
    return await dashboard.fetch_latest_invoices(session_factory)


@router.get(
    "/pages",
    summary="Invoice Page Count",
    description="Retrieve the number of invoice table pages for a search query.",
    response_description="Object with the total number of pages.",
    responses={500: {"description": "Failed to fetch total number of invoices."}},
)
async def invoice_pages(session_factory: SessionFactoryDep, query: str = "") -> dict:
    total_pages = await dashboard.fetch_invoices_pages(query, session_factory)
    return {"total_pages": total_pages}


@router.get(
    "",
    response_model=list[InvoiceTableRow],
    summary="Search Invoices",
    description="Retrieve one page of invoices matching the query, newest first.",
    responses={500: {"description": "Failed to fetch invoices."}},
)
async def search_invoices(
    session_factory: SessionFactoryDep,
    query: str = "",
    page: int = Query(default=1, ge=1, description="1-based page number"),
) -> list[InvoiceTableRow]:
    """
    Search invoices.

    - **query**: Case-insensitive text matched against customer name, email, amount, date and status.
    - **page**: Page number; each page holds six invoices.
    """
    invoices = await dashboard.fetch_filtered_invoices(query, page, session_factory)
    logger.debug(f"Retrieved {len(invoices)} invoices (query={query!r}, page={page})")
    return invoices


@router.get(
    "/{invoice_id}",
    response_model=InvoiceForm,
    summary="Get Invoice",
    description="Retrieve an invoice for the edit form, with the amount in dollars.",
    responses={
        404: {"description": "Invoice not found"},
        500: {"description": "Failed to fetch invoice."},
    },
)
async def get_invoice(invoice_id: str, session_factory: SessionFactoryDep) -> InvoiceForm:
    invoice = await dashboard.fetch_invoice_by_id(invoice_id, session_factory)
    if invoice is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Invoice {invoice_id} not found",
        )
    return invoice
