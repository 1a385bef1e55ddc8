"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from lang_portal.config import configure_logging, get_settings
from lang_portal.database import Database
from lang_portal.exceptions import UNEXPECTED_ERROR_DETAIL, LangPortalError
from lang_portal.routers import dashboard, groups, study_activities, study_sessions, words

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the store at startup and release it on shutdown."""
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT, log_sql=settings.LOG_SQL)

    database = Database(settings)
    if settings.CREATE_TABLES_ON_STARTUP:
        database.create_tables()
    app.state.database = database

    logger.info("application_started", environment=settings.ENVIRONMENT)
    try:
        yield
    finally:
        database.dispose()
        app.state.database = None
        logger.info("application_stopped")


async def lang_portal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map domain errors to their status code."""
    assert isinstance(exc, LangPortalError)
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("request_failed", path=request.url.path, error=exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": UNEXPECTED_ERROR_DETAIL},
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def database_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Storage failures never leak query text to the client."""
    logger.error("database_error", path=request.url.path, error=str(exc), exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": UNEXPECTED_ERROR_DETAIL},
    )


def create_app() -> FastAPI:
    """Build the application with middleware, error handlers and routers."""
    settings = get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Backend for a vocabulary learning portal",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(LangPortalError, lang_portal_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)

    for module in (dashboard, study_activities, study_sessions, words, groups):
        app.include_router(module.router, prefix=settings.API_PREFIX)

    @app.get("/", tags=["root"])
    def root() -> dict[str, str]:
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}

    @app.get("/health", tags=["root"])
    def health() -> dict[str, str]:
        return {"status": "healthy"}

    return app


app = create_app()
