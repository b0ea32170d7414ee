"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS),
exception handlers and includes all API routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from acme_dashboard.core.database import dispose_engine, init_db
from acme_dashboard.core.logging_config import get_logger, setup_logging

from .api.v1 import customers, dashboard, health, invoices, revenue, seed
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    On startup, optionally creates missing tables (``DATABASE_AUTO_CREATE``).
    On shutdown, releases every pooled database connection.
    """
    logger.info("Starting up Acme Dashboard Server...")
    if settings.database_auto_create:
        try:
            await init_db()
            logger.info("Database tables created")
        except Exception as e:
            logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    logger.info("Shutting down Acme Dashboard Server...")
    await dispose_engine()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Acme Dashboard API

    Read-only access to the invoices, customers and revenue shown on the Acme
    dashboard, plus a one-shot endpoint seeding the database with placeholder data.
    """,
    version=constant.VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)

setup_exception_handlers(app)

app.include_router(health.router, tags=["health"])
app.include_router(seed.router, tags=["seed"])
app.include_router(revenue.router, prefix=f"{constant.API_V1_STR}/revenue", tags=["revenue"])
app.include_router(invoices.router, prefix=f"{constant.API_V1_STR}/invoices", tags=["invoices"])
app.include_router(customers.router, prefix=f"{constant.API_V1_STR}/customers", tags=["customers"])
app.include_router(dashboard.router, prefix=f"{constant.API_V1_STR}/dashboard", tags=["dashboard"])


def run() -> None:
    """Serve the application on ``DASHBOARD_SERVER_HOST``:``DASHBOARD_SERVER_PORT``."""
    import uvicorn

    logger.info(f"Starting Acme Dashboard API on http://{settings.server_host}:{settings.server_port}")
    uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
