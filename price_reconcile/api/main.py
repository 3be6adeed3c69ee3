"""
FastAPI Application Entry Point
===============================

Main FastAPI application with health check, middleware
and error handling.
"""

import time
from typing import Any
from uuid import uuid4

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from price_reconcile import __version__
from price_reconcile.config.settings import get_settings
from price_reconcile.utils.errors import ReconcileError
from price_reconcile.utils.logger import (
    bind_request_context,
    clear_request_context,
    configure_logging,
    get_logger,
)

# Configure logging at module load
configure_logging()
logger = get_logger(__name__)


def create_app() -> FastAPI:
    """
    FastAPI application factory.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Price Reconcile API",
        description=(
            "Reconciles AI-extracted supplier price lists: merges drifting "
            "column headers, normalizes prices and resolves product name, cost "
            "and SRP per row with fallbacks and manual corrections."
        ),
        version=__version__,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
    )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Request Logging Middleware
    # -------------------------------------------------------------------------
    @app.middleware("http")
    async def log_requests(request: Request, call_next: Any) -> Any:
        """
        Log all incoming requests with timing and correlation ID.

        Adds X-Request-ID header for tracing and X-Process-Time header
        with request duration in seconds.
        """
        request_id = str(uuid4())
        start_time = time.perf_counter()
        bind_request_context(request_id, path=str(request.url.path))

        logger.info(
            "Request received",
            method=request.method,
            client_ip=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)

            process_time = time.perf_counter() - start_time
            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.4f}"

            logger.info(
                "Request completed",
                method=request.method,
                status_code=response.status_code,
                duration_ms=round(process_time * 1000, 2),
            )
        finally:
            clear_request_context()

        return response

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(ReconcileError)
    async def reconcile_error_handler(
        request: Request, exc: ReconcileError
    ) -> JSONResponse:
        """Handle application-specific errors."""
        logger.error(
            "Application error",
            error_type=type(exc).__name__,
            message=exc.message,
            details=exc.details,
            path=str(request.url),
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": type(exc).__name__,
                "message": exc.message,
                "details": exc.details,
            },
        )

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check endpoint",
        response_model=dict[str, Any],
    )
    async def health_check() -> dict[str, Any]:
        """Check service health status."""
        return {
            "status": "healthy",
            "version": __version__,
            "service": "price-reconcile",
            "environment": settings.environment,
        }

    # -------------------------------------------------------------------------
    # API Info Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/",
        tags=["Info"],
        summary="API information",
    )
    async def api_info() -> dict[str, str]:
        """Return basic API information."""
        return {
            "service": "price-reconcile",
            "version": __version__,
            "description": "Price list extraction reconciliation service",
            "docs": "/docs",
        }

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    from price_reconcile.api.routes import reconcile_router

    app.include_router(reconcile_router, prefix="/reconcile", tags=["Reconcile"])

    return app


# Create application instance
app = create_app()
