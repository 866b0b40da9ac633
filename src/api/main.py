"""
FastAPI application factory and configuration.

This module builds the FastAPI application for customer registration:
it owns the connection pool lifecycle, applies schema migrations on
startup, and mounts the versioned routes.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.v1 import router as v1_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

tags_metadata = [
    {
        "name": "v1",
        "description": "Customer Registration API v1 - Validate and register customer accounts",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Open the connection pool and migrate the schema for the app's lifetime.

    The pool is stored in app.state, where get_pool() picks it up.
    """
    settings = get_settings()

    logger.info(
        "Opening database pool (min=%s, max=%s)",
        settings.pool_min_size,
        settings.pool_max_size,
    )
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
        open=True,
    )

    try:
        run_migrations(pool)
        app.state.pool = pool
        logger.info("Registration service ready")
        yield
    finally:
        pool.close()
        logger.info("Database connection pool closed")


def create_app() -> FastAPI:
    """Build the registration application with v1 routes and a health check."""
    application = FastAPI(
        title="videoshop-registration",
        description="Customer self-registration API - Validates submissions before account creation",
        version="0.1.0",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )
    application.include_router(v1_router, prefix="/v1")

    @application.get("/health")
    def health_check(request: Request) -> dict[str, str]:
        """
        Health check endpoint with database validation.

        Returns 200 OK if the customer store answers a trivial query.
        """
        pool = request.app.state.pool
        with pool.connection() as conn:
            conn.execute("SELECT 1")

        return {"status": "healthy"}

    return application


app = create_app()
