"""
Dashboard Overview Endpoints.
"""

from fastapi import APIRouter

from acme_dashboard.core import dashboard
from acme_dashboard.core.models import CardData

from ...services.deps import SessionFactoryDep

router = APIRouter()


@router.get(
    "/cards",
    response_model=CardData,
    summary="Get Summary Cards",
    description="Retrieve the invoice and customer counts and the paid and pending totals.",
    responses={500: {"description": "Failed to fetch card data."}},
)
async def get_card_data(session_factory: SessionFactoryDep) -> CardData:
    """
    Get the summary card figures.

    Totals are formatted as US dollar strings.
    """
    return await dashboard.fetch_card_data(session_factory)
