"""
Main FastAPI application entry point.

Wires the auth API together:
- Security headers and CORS (credentials allowed for the refresh cookie)
- Global exception handlers (`{error, code}` bodies)
- /auth/* and /admin/users/* routers under API_PREFIX
- /health

Run:
    uvicorn src.main:app --host 0.0.0.0 --port 8000
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.container import get_database, get_logger
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware.security_headers_middleware import (
    SecurityHeadersMiddleware,
)
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: log configuration summary (never secrets)
    - Shutdown: dispose database connection pool

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    logger.info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
        rate_limit_backend=settings.rate_limit_backend,
        rate_limit_enabled=settings.rate_limit_enabled,
    )

    yield

    await get_database().close()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """Build the FastAPI application.

    Returns:
        Configured FastAPI instance.
    """
    application = FastAPI(
        title=settings.app_name,
        description="Authentication and session API",
        version=settings.app_version,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-Refresh-Token"],
    )
    application.add_middleware(
        SecurityHeadersMiddleware,
        production=settings.is_production,
    )

    register_exception_handlers(application)

    application.include_router(system_router)
    application.include_router(v1_router)

    return application


app = create_app()
