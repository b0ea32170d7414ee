"""
Revenue Endpoints.
"""

from fastapi import APIRouter

from acme_dashboard.core import dashboard
from acme_dashboard.core.models import RevenueRead

from ...services.deps import SessionFactoryDep

router = APIRouter()


@router.get(
    "",
    response_model=list[RevenueRead],
    summary="List Revenue",
    description="Retrieve the revenue of every month for the revenue chart.",
    responses={500: {"description": "Failed to fetch revenue data."}},
)
async def list_revenue(session_factory: SessionFactoryDep) -> list[RevenueRead]:
    return await dashboard.fetch_revenue(session_factory)
