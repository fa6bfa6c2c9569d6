"""
Backbench Admin - Main Application Entry Point

Back-office API serving administrator dashboard statistics and student
redemption histories for the student discount marketplace.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from backbench_admin import __version__
from backbench_admin.core.config import settings
from backbench_admin.core.logging import setup_logging
from backbench_admin.core.metrics import get_metrics, get_metrics_content_type
from backbench_admin.infrastructure.database import db_manager
from backbench_admin.presentation.api import api_router
from backbench_admin.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Set up logging
    - Initialize the database pool when reading Postgres directly
    - Clean up on shutdown
    """
    setup_logging()
    if settings.store_backend == "sql":
        db_manager.init()

    logger = structlog.get_logger(__name__)
    logger.info(
        "application_started",
        version=__version__,
        store_backend=settings.store_backend,
    )
    if not settings.admin_secret:
        logger.error("admin_secret_not_configured")

    yield

    await db_manager.close()
    logger.info("application_stopped")


app = FastAPI(
    title="Backbench Admin",
    description="Administrator back office for the student discount marketplace",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

error_handler_middleware(app)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    if not settings.metrics_enabled:
        return Response(status_code=404)
    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type(),
    )


@app.get("/", include_in_schema=False)
async def root():
    """Redirect to API documentation."""

    return RedirectResponse(url="/docs")
