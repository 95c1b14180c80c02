"""Entry point for the bus feedback service."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import v1_router
from app.core.config import settings
from app.core.database import Database, DatabaseError
from app.core.error_handlers import register_exception_handlers
from app.core.logging import setup_logging

logger = logging.getLogger(__name__)


def _cors_origins() -> list[str]:
    origins = [origin.strip() for origin in settings.CORS_ORIGINS.split(",") if origin.strip()]
    return origins or ["*"]


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the application; ``database`` replaces the MySQL gateway when given."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        gateway = database or Database.from_settings(settings)
        app.state.database = gateway
        # A failed connection check is only reported; requests surface their own errors.
        if gateway.verify_connection() and settings.DB_CREATE_TABLES:
            try:
                gateway.create_schema()
            except DatabaseError:
                logger.exception("Could not create the feedback table")

        yield

        gateway.dispose()
        logger.info("Database pool disposed")

    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(v1_router, prefix="/api")

    @app.get("/", include_in_schema=False)
    def welcome() -> dict:
        return {"message": "Bem-vindo à API de Feedback de Transporte!"}

    return app


setup_logging()
app = create_app()


__all__ = ["app", "create_app"]
