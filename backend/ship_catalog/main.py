"""Ship Catalog API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ShipCatalogError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Run:
    uvicorn ship_catalog.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ship_catalog.api.error_handlers import register_error_handlers
from ship_catalog.api.routes import health, ships
from ship_catalog.config import get_settings
from ship_catalog.infrastructure.database import init_db
from ship_catalog.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    if settings.create_tables_on_startup:
        await manager.create_tables()
    logger.info("Ship Catalog API started")
    yield
    await manager.close()
    logger.info("Ship Catalog API shutting down")


app = FastAPI(title="Ship Catalog API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(ships.router)

register_error_handlers(app)
