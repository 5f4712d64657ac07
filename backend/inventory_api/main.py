"""Inventory API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map InventoryError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The DatabaseSessionManager is opened in the lifespan, kept on app.state,
      and disposed at shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app() factory so tests and scripts can build an app with their own settings
"""

import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from inventory_api.api.error_handlers import register_error_handlers
from inventory_api.api.routes import health, products, stores
from inventory_api.config import Settings, get_settings
from inventory_api.infrastructure.database import DatabaseSessionManager
from inventory_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        db_manager = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            echo=settings.database_echo,
        )
        if settings.database_create_tables:
            await db_manager.create_all()
        app.state.db_manager = db_manager
        logger.info("Inventory API started")
        try:
            yield
        finally:
            await db_manager.close()
            app.state.db_manager = None
            logger.info("Inventory API shut down")

    app = FastAPI(title="Inventory API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(stores.router)
    app.include_router(products.router)

    # Mounted after the API routes so /api/* and /health take precedence;
    # html=True serves index.html for client-side routes
    if os.path.isdir(settings.static_dir):
        app.mount(
            "/", StaticFiles(directory=settings.static_dir, html=True),
            name="static",
        )

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("inventory_api.main:app", host="0.0.0.0", port=4000, reload=True)
