"""FastAPI application factory and lifespan."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from plant_tracker.api import api_router
from plant_tracker.core.config import Settings, get_settings
from plant_tracker.core.constants import ROOT_GREETING
from plant_tracker.core.errors import register_exception_handlers
from plant_tracker.core.logging_config import setup_logging
from plant_tracker.db.session import Database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: optionally create tables; shutdown: release the connection pool."""
    database: Database = app.state.database
    if app.state.settings.auto_create_tables:
        await database.create_tables()
    yield
    await database.dispose()


def create_application(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.database = Database(settings)

    if settings.debug:
        cors_origins = ["*"]
    elif settings.environment == "development":
        cors_origins = ["http://localhost:3000", "http://127.0.0.1:3000"]
    else:
        cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return ROOT_GREETING

    app.include_router(api_router)
    logger.info(
        "Application created (strict_ownership=%s, page_size=%s)",
        settings.strict_ownership,
        settings.page_size,
    )
    return app
