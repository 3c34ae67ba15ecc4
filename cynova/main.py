"""Cynova API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CynovaError / validation / HTTP / Exception
      to JSON bodies (see api/error_handlers.py)
    - CORS configured from settings (not hardcoded)
    - The database manager is built in the lifespan and stored on app.state.db;
      request handlers reach it only through the get_db dependency

Design Decisions:
    - create_app() factory: tests build an app whose lifespan never touches
      the configured database (they install their own manager)
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from cynova.api.error_handlers import register_error_handlers
from cynova.api.routes import blogs, health, ingredients, products, users
from cynova.config import get_settings
from cynova.infrastructure.database import DatabaseSessionManager
from cynova.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if getattr(app.state, "db", None) is None:
        manager = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_url.startswith("sqlite"):
            await manager.create_all()
        app.state.db = manager
    logger.info(f"Cynova API started ({settings.environment})")
    yield
    logger.info("Cynova API shutting down")
    await app.state.db.dispose()
    app.state.db = None


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Cynova API", version=health.SERVICE_VERSION, lifespan=lifespan)
    app.state.db = None

    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(ingredients.router)
    app.include_router(blogs.router)
    app.include_router(users.router)

    register_error_handlers(app)
    return app


app = create_app()
