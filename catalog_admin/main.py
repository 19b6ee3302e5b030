"""Catalog admin API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from catalog_admin.api.categories import router as categories_router
from catalog_admin.api.health import router as health_router
from catalog_admin.api.middleware import setup_middleware
from catalog_admin.domain.exceptions import DomainError, NotFoundError
from catalog_admin.infrastructure.config import settings
from catalog_admin.infrastructure.logging import configure_logging
from catalog_admin.infrastructure.memory import get_database
from catalog_admin.infrastructure.seed import seed_demo_data

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    configure_logging(settings)
    logger.info(
        "Starting catalog admin API",
        version=settings.api_version,
        debug=settings.debug,
    )

    database = get_database()
    if settings.seed_demo_data and not database.categories:
        seed_demo_data(database)

    yield

    logger.info("Shutting down catalog admin API")


app = FastAPI(
    title="Catalog Admin API",
    description="View-models for the catalog administration screens",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware (request ID, API key auth)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(categories_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


def _error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: object,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details,
            "request_id": getattr(request.state, "request_id", None),
        },
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "ERROR"
        message = str(detail)
        details = []

    return _error_response(request, exc.status_code, error_code, message, details)


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Translate domain errors into client errors."""
    if isinstance(exc, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_400_BAD_REQUEST

    logger.warning(
        "Domain error",
        path=request.url.path,
        error_code=exc.error_code,
        error=exc.message,
    )
    return _error_response(request, status_code, exc.error_code, exc.message, exc.details)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions with consistent format."""
    logger.exception(
        "Unhandled exception in handler",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )

    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "An internal error occurred",
        [],
    )


def main() -> None:
    """Run the API server.

    Entry point for the ``catalog-admin`` console script.
    """
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
