"""Warehouse Inventory API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to an Err envelope
    - CORS configured from settings (not hardcoded)
    - The store handle is created, schema-checked and disposed by the lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - DatabaseSessionManager lives on app.state, not in a module global
    - No seeding at startup: demo rows come from the warehouse-seed script
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from warehouse.api.error_handlers import register_error_handlers
from warehouse.api.middleware import register_request_logging
from warehouse.api.routes import api_docs, health, items
from warehouse.config import get_settings
from warehouse.infrastructure.database import DatabaseSessionManager
from warehouse.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = DatabaseSessionManager(settings.sqlalchemy_url)
    await manager.create_schema()
    app.state.db_manager = manager
    logger.info("Warehouse Inventory API started")
    try:
        yield
    finally:
        logger.info("Warehouse Inventory API shutting down")
        await manager.close()
        app.state.db_manager = None


app = FastAPI(
    title="Warehouse Inventory API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_request_logging(app)

app.include_router(health.router)
app.include_router(items.router)
app.include_router(api_docs.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    settings = get_settings()
    uvicorn.run("warehouse.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
