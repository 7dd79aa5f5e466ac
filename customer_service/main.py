"""
Customer Service — FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn customer_service.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware: Request ID → Logging → CORS            │
    │                                                     │
    │  Routes: /api/customers (CRUD + photos), /health    │
    │                                                     │
    │  Exception Handlers:                                │
    │    CustomerValidationError → 400 {errors,...}       │
    │    RequestValidationError  → 400 {errors,...}       │
    │    DatabaseError / FileStorageError → 500           │
    │    Exception               → 500                    │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging, uploads directory, MongoDB client
    Shutdown: close the MongoDB client
"""

import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import AsyncGenerator, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from customer_service import __version__
from customer_service.config import settings
from customer_service.database import close_client, get_client
from customer_service.exceptions import (
    CustomerValidationError,
    DatabaseError,
    FieldError,
    FileStorageError,
)
from customer_service.middleware.logging import RequestLoggingMiddleware
from customer_service.middleware.request_id import RequestIDMiddleware, request_id_var
from customer_service.routes import customers, health
from customer_service.schemas.customer import ErrorResponse, ValidationErrorResponse

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party libraries that log every operation
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Customer Service starting up...")

    uploads = Path(settings.uploads_path)
    uploads.mkdir(parents=True, exist_ok=True)
    logger.info("Uploads directory: %s", uploads.resolve())

    # Client creation does not block on the server; /health reports reachability
    get_client()

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Customer Service shutting down...")
    close_client()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _validation_response(messages: List[str]) -> JSONResponse:
    body = ValidationErrorResponse(
        errors=messages,
        timestamp=datetime.now(timezone.utc),
        status=400,
    )
    return JSONResponse(status_code=400, content=body.model_dump(mode="json"))


def _server_error(message: str) -> JSONResponse:
    body = ErrorResponse(
        error="server_error",
        message=message,
        request_id=request_id_var.get(""),
    )
    return JSONResponse(status_code=500, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and response formats.

    Handler hierarchy:
        CustomerValidationError → 400 (field-presence failures on create)
        RequestValidationError  → 400 (malformed body or wrong field types)
        DatabaseError           → 500
        FileStorageError        → 500
        Exception (fallback)    → 500

    Error bodies never carry driver messages or file paths; those are logged.
    """

    @app.exception_handler(CustomerValidationError)
    async def handle_customer_validation(request: Request, exc: CustomerValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.messages)
        return _validation_response(exc.messages)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        messages = []
        for error in exc.errors():
            loc = error.get("loc") or ("body",)
            msg = error.get("msg", "is invalid")
            messages.append(FieldError(str(loc[-1]), msg[:1].lower() + msg[1:]).describe())
        logger.warning("[%s] Request validation error: %s", request_id_var.get(""), messages)
        return _validation_response(messages)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""), exc.message, exc.context,
        )
        return _server_error("An internal error occurred. Please try again later.")

    @app.exception_handler(FileStorageError)
    async def handle_file_storage_error(request: Request, exc: FileStorageError):
        logger.error(
            "[%s] File storage error: %s | Context: %s",
            request_id_var.get(""), exc.message, exc.context,
        )
        return _server_error(exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return _server_error("An unexpected error occurred.")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Why factory (not module-level app):
        Tests build a fresh app and bind in-memory dependencies through
        app.dependency_overrides without touching global state.
    """
    app = FastAPI(
        title="Customer Service API",
        description="CRUD API for customers backed by MongoDB, with photo uploads.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Location"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(customers.router)
    app.include_router(health.router)

    return app


# uvicorn expects `customer_service.main:app` to be importable
app = create_app()
