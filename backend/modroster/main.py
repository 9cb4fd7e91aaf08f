"""modroster API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery — ExMA anti-pattern)
    - Global error handlers map ModRosterError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Catalog built exactly once on startup via lifespan, stored on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Catalog integrity problems are logged at startup, not fatal: resolution
      still raises UnknownAttributeError for the affected chips
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from modroster.api.error_handlers import register_error_handlers
from modroster.api.routes import chips, health, members, products
from modroster.config import get_settings
from modroster.core.catalog import build_catalog, validate_catalog
from modroster.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.catalog = build_catalog()
    if settings.validate_catalog_on_startup:
        broken = validate_catalog(app.state.catalog)
        if broken:
            logger.warning(f"Catalog has {len(broken)} unresolvable chip(s)")
    logger.info("modroster API started")
    yield
    logger.info("modroster API shutting down")


app = FastAPI(title="modroster API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(products.router)
app.include_router(chips.router)
app.include_router(members.router)

register_error_handlers(app)
