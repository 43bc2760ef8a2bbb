"""Warehouser API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WarehouserError -> plain-text responses with
      the status code of its ErrorKind
    - CORS configured from settings (not hardcoded)
    - Database pool initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema is owned by Alembic migrations; the app never creates tables
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from warehouser.api.error_handlers import register_error_handlers
from warehouser.api.routes import health, items, warehouses
from warehouser.config import get_settings
from warehouser.infrastructure.database import init_db
from warehouser.infrastructure.observability import setup_logging

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
        pool_timeout=settings.database_pool_timeout,
    )
    logger.info("Warehouser API started")
    yield
    await manager.dispose()
    logger.info("Warehouser API shutting down")


app = FastAPI(
    title="Warehouser API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(items.router)
app.include_router(warehouses.router)

register_error_handlers(app)
