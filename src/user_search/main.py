"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from user_search.config import get_settings
from user_search.middleware import setup_middleware
from user_search.routes import api_router
from user_search.services import get_database_client, reset_services
from user_search_common.models.page import InvalidPageRequestError

# Initialize settings
settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Handle application lifespan events."""
    # Startup
    logger.info("%s v%s started", settings.app_name, settings.app_version)
    logger.info("Environment: %s", settings.environment)
    logger.info("Log level: %s", settings.log_level)

    database = get_database_client(settings)
    logger.info("Database: %s", database.url.render_as_string(hide_password=True))
    if settings.database_create_schema:
        database.create_schema()

    yield

    # Shutdown
    reset_services()
    logger.info("%s shutting down", settings.app_name)


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="User search - FastAPI backend service",
    version=settings.app_version,
    lifespan=lifespan,
    redirect_slashes=False,
)

# Cross-origin access, off unless origins are configured
setup_middleware(app, cors_origins=settings.cors_origins)


@app.exception_handler(InvalidPageRequestError)
async def invalid_page_request_handler(request: Request, exc: InvalidPageRequestError) -> JSONResponse:
    """Reject out-of-range pagination parameters as a client error."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc)},
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Surface storage failures as a server-side error without retrying."""
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Database unavailable"},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and answer with a generic 500."""
    logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# Include routers
app.include_router(api_router)


def run() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "user_search.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
