"""Showcase API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ShowcaseError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Gateway (and database, when configured) initialized on startup via lifespan
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from showcase.api.error_handlers import register_error_handlers
from showcase.api.routes import health, use_cases
from showcase.config import get_settings
from showcase.infrastructure.database import close_db
from showcase.infrastructure.observability import setup_logging
from showcase.services.use_case_gateway import init_gateway

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    gateway = init_gateway(settings)
    logger.info(
        f"Showcase API started ({gateway.select_store().backend.value} store)",
    )
    yield
    await close_db()
    logger.info("Showcase API shutting down")


app = FastAPI(
    title="Showcase API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(use_cases.router)

register_error_handlers(app)
