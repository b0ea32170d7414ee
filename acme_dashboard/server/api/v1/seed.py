"""
Database Seed Endpoint.

A one-shot endpoint loading the placeholder users, customers, invoices and
revenue into the database inside a single transaction.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from acme_dashboard.core.database.seed import seed_database
from acme_dashboard.core.logging_config import get_logger

from ...services.deps import SessionFactoryDep

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/seed",
    summary="Seed Database",
    description="Load the placeholder data. Users, customers and revenue are inserted once; invoices are appended on every call.",
    response_description="Success or error message.",
    responses={
        200: {"description": "Database seeded successfully"},
        500: {"description": "Seeding failed and was rolled back"},
    },
)
async def seed(session_factory: SessionFactoryDep) -> JSONResponse:
    """
    Seed the database.

    Runs every seeding step in one transaction; on failure nothing is written and
    a 500 response is returned. The session is closed in every case.
    """
    try:
        summary = await seed_database(session_factory)
    except Exception as e:
        logger.error(f"Failed to seed the database: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to seed the database"},
        )

    logger.debug(f"Seed summary: {summary}")
    return JSONResponse(status_code=status.HTTP_200_OK, content={"message": "Database seeded successfully"})
