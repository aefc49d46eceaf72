"""Paygate Backend: FastAPI application entry point."""

import uuid
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from paygate.api.deps import build_gateway
from paygate.api.routes import api_router
from paygate.core.config import Settings, get_settings
from paygate.core.exceptions import PaygateError
from paygate.core.logging import configure_logging
from paygate.middleware.correlation import (
    get_correlation_id,
    setup_correlation_middleware,
)
from paygate.services.transaction_store import InMemoryTransactionStore

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    settings: Settings = app.state.settings
    logger.info(
        "startup_begin",
        app_name=settings.app_name,
        debug=settings.debug,
        gateway_mode=settings.gateway_mode,
        frontend_url=settings.frontend_url,
    )
    if not settings.paystack_secret_key:
        logger.warning("paystack_secret_key_missing", effect="webhooks will be rejected")

    yield

    logger.info("shutdown_complete", transactions_recorded=len(app.state.transaction_store.list()))


def _error_response(status_code: int, message: str, debug_id: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, "debug_id": debug_id},
    )


async def paygate_exception_handler(request: Request, exc: PaygateError) -> JSONResponse:
    """Map the PaygateError taxonomy onto {success: false, message} responses."""
    debug_id = str(uuid.uuid4())

    logger.warning(
        "request_failed",
        status_code=exc.status_code,
        error_type=type(exc).__name__,
        debug_id=debug_id,
        correlation_id=get_correlation_id(),
        path=request.url.path,
        method=request.method,
        detail=exc.message,
    )
    return _error_response(exc.status_code, exc.message, debug_id)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies answer 400 like missing fields do."""
    debug_id = str(uuid.uuid4())
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    message = f"Invalid request: {location} {first.get('msg', '')}".strip() if location else "Invalid request body"

    logger.warning(
        "request_validation_failed",
        debug_id=debug_id,
        correlation_id=get_correlation_id(),
        path=request.url.path,
        method=request.method,
        error_count=len(errors),
    )
    return _error_response(400, message, debug_id)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler for unhandled errors with debug_id tracking.

    Logs full exception with traceback, returns generic 500 to client.
    """
    debug_id = str(uuid.uuid4())

    logger.error(
        "unhandled_exception",
        debug_id=debug_id,
        correlation_id=get_correlation_id(),
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
        exc_info=True,
    )
    return _error_response(500, "Internal server error", debug_id)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Paystack payment integration backend",
        version="0.1.0",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.gateway = build_gateway(settings)
    app.state.transaction_store = InMemoryTransactionStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Correlation ID middleware (runs first on incoming requests)
    setup_correlation_middleware(app)

    app.exception_handler(PaygateError)(paygate_exception_handler)
    app.exception_handler(RequestValidationError)(request_validation_handler)
    app.exception_handler(Exception)(generic_exception_handler)

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "paygate.main:app",
        host="0.0.0.0",
        port=_settings.port,
        reload=_settings.debug,
        log_config=None,
    )
