"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, get_settings
from app.infrastructure.database import Database
from app.infrastructure.logging.log_config import setup_logging
from app.presentation.api.error_handlers import register_error_handlers
from app.presentation.api.middleware import register_request_logging
from app.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, create tables, close the pool."""
    settings: Settings = app.state.settings
    database: Database = app.state.database
    setup_logging(settings)

    await database.create_all()
    logger.info(
        "%s %s started (env=%s)",
        settings.app_title,
        settings.app_version,
        settings.app_env,
    )

    yield

    # Shutdown
    await database.dispose()
    logger.info("Database connections closed")


def create_app(
    settings: Settings | None = None,
    database: Database | None = None,
) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    The database handle is created here (or injected, e.g. by tests) and kept
    on ``app.state``; nothing in the request path reaches for a global.
    """
    settings = settings or get_settings()
    database = database or Database(settings.database_url, echo=settings.echo_sql)

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_request_logging(app, colors=settings.log_colors)
    register_error_handlers(app)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=_settings.host,
        port=_settings.port,
        reload=_settings.app_env == "development",
    )
