"""FastAPI application entry point for the fraud risk engine."""

import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from riskengine.api.middleware.error_handler import global_exception_handler
from riskengine.api.middleware.logging import StructuredLoggingMiddleware
from riskengine.api.routes.fraud import get_scorer
from riskengine.api.routes.fraud import router as fraud_router
from riskengine.api.routes.health import router as health_router
from riskengine.config import settings
from riskengine.shared.logging import setup_logging

logger = structlog.get_logger()

# Track app start time for uptime calculation
APP_START_TIME: float = 0.0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown logic."""
    global APP_START_TIME
    APP_START_TIME = time.time()
    setup_logging(settings.log_level)

    logger.info(
        "riskengine_starting",
        app_name=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
    )

    # Build the scorer eagerly so a bad catalog file fails startup
    scorer = get_scorer()
    logger.info("fraud_scorer_ready", **scorer.catalog.summary())

    yield

    logger.info("riskengine_shutting_down", tracked_customers=len(scorer.velocity))


app = FastAPI(
    title="Fraud Risk Engine",
    description="Transparent rule-based fraud risk scoring for payment transactions",
    version=settings.app_version,
    lifespan=lifespan,
)

# CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.debug else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Structured logging middleware
app.add_middleware(StructuredLoggingMiddleware)

# Client errors are handled inside the app; Exception covers the rest
for _exc_type in (ValueError, PermissionError, LookupError, Exception):
    app.add_exception_handler(_exc_type, global_exception_handler)

# Register routers
app.include_router(health_router)
app.include_router(fraud_router)


def get_uptime() -> int:
    """Get application uptime in seconds."""
    if APP_START_TIME == 0.0:
        return 0
    return int(time.time() - APP_START_TIME)
