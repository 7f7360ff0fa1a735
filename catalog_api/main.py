"""Catalog API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CatalogError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Storage initialized on startup and closed on shutdown via lifespan

Run with: uvicorn catalog_api.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_api.api.error_handlers import register_error_handlers
from catalog_api.api.routes import health, products, users
from catalog_api.config import get_settings
from catalog_api.infrastructure.observability import setup_logging
from catalog_api.infrastructure.storage import close_storage, init_storage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    await init_storage(
        settings.storage_backend,
        database_url=settings.database_url,
        seed=settings.seed_fixture_data,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Catalog API started")
    yield
    await close_storage()
    logger.info("Catalog API shutting down")


app = FastAPI(title="Catalog API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(products.router)
app.include_router(users.router)

register_error_handlers(app)
