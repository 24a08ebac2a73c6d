"""
FastAPI application factory.

This module sets up:
- FastAPI application with middleware
- Exception handlers
- API routes
- CORS configuration
- Startup bootstrap and shutdown cleanup
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from authcore.infrastructure.adapters.inbound.api.handlers import register_exception_handlers
from authcore.infrastructure.adapters.inbound.api.middleware import (
    RequestIDMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)
from authcore.infrastructure.adapters.inbound.api.routes import auth, health, roles, users
from authcore.infrastructure.bootstrap import run_bootstrap
from authcore.infrastructure.config.container import Container
from authcore.infrastructure.config.settings import Settings, get_settings
from authcore.infrastructure.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):  # type: ignore
    """
    Lifespan context manager for startup and shutdown events.

    Handles:
    - Seeding roles and the optional bootstrap superadmin
    - Resource cleanup on shutdown
    """
    container: Container = app.state.container
    settings = container.settings

    logger.info(f"Starting {settings.app_name} v{settings.version}")
    logger.info(f"Environment: {settings.environment}")

    await run_bootstrap(container)

    yield

    logger.info("Shutting down application")
    await container.close()


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[Container] = None,
) -> FastAPI:
    """
    Build a configured application.

    Args:
        settings: Settings to use, loaded from the environment when omitted
        container: Pre-built container (tests inject one with a fake clock)

    Returns:
        FastAPI application
    """
    if container is not None:
        settings = container.settings
    elif settings is None:
        settings = get_settings()

    setup_logging(settings)

    if container is None:
        container = Container(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        description="Authentication and role-based access control service",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.container = container

    # ========================================================================
    # Exception Handlers
    # ========================================================================
    register_exception_handlers(app, debug=settings.debug)

    # ========================================================================
    # Middleware Setup (last added runs first)
    # ========================================================================
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware, enable_hsts=settings.is_production)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ========================================================================
    # API Routes
    # ========================================================================
    api_router = APIRouter(prefix=settings.api_prefix)
    api_router.include_router(health.router)
    api_router.include_router(auth.router)
    api_router.include_router(roles.router)
    api_router.include_router(users.router)
    app.include_router(api_router)

    return app
