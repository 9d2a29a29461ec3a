"""FastAPI main application module."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ...infrastructure.logging import LoggingConfig, get_logger
from ...infrastructure.services import initialize_services, shutdown_services
from .config import Settings, get_settings
from .middleware import RequestResponseLoggingMiddleware
from .routes import admin, health, pages


logger = get_logger(__name__)


def configure_logging(settings: Settings) -> LoggingConfig:
    """Install the JSON log handlers described by the settings."""
    config = LoggingConfig(
        log_level=settings.log_level,
        service_name=settings.service_name,
        log_dir=settings.log_dir,
        enable_console=settings.log_enable_console,
        enable_file=settings.log_enable_file
    )
    config.setup_logging()
    return config


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    configure_logging(get_settings())

    logger.info("Starting Car Rental web app")
    await initialize_services()

    yield

    logger.info("Shutting down Car Rental web app")
    await shutdown_services()


def add_exception_handlers(app: FastAPI) -> None:
    """Add custom exception handlers to the FastAPI application."""

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        """Handle validation errors from business logic."""
        logger.warning(f"Validation error on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=400,
            content={
                "detail": str(exc),
                "type": "validation_error"
            }
        )

    @app.exception_handler(RuntimeError)
    async def runtime_error_handler(request: Request, exc: RuntimeError):
        """Handle runtime errors such as an unconnected database."""
        logger.error(f"Runtime error on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error occurred",
                "type": "runtime_error"
            }
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Car Rental",
        description="Book available cars and review all bookings",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan
    )

    add_exception_handlers(app)

    app.add_middleware(RequestResponseLoggingMiddleware)

    app.include_router(health.router, tags=["health"])
    app.include_router(pages.router, tags=["pages"])
    app.include_router(admin.router, prefix="/admin", tags=["admin"])

    return app


# Create app instance
app = create_app()
