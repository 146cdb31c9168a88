"""
Application entry point.

Creates the FastAPI application and wires together:
- Connection provider (one per process, fails fast without DATABASE_URL)
- Routers (health, beneficiaries, document types)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting, CORS)
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from beneficiaries_api.core.config import Settings, settings as default_settings
from beneficiaries_api.infrastructure.database import ConnectionProvider
from beneficiaries_api.interfaces.health import router as health_router
from beneficiaries_api.interfaces.registry.beneficiaries import (
    router as beneficiaries_router,
)
from beneficiaries_api.interfaces.registry.document_types import (
    router as document_types_router,
)
from beneficiaries_api.shared.errors.handlers import register_error_handlers
from beneficiaries_api.shared.errors.middleware import UnhandledErrorMiddleware
from beneficiaries_api.shared.logging import configure_logging
from beneficiaries_api.shared.security.headers import SecurityHeadersMiddleware
from beneficiaries_api.shared.security.rate_limiting import install_rate_limiting

API_PREFIX = "/api/v1"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: release pooled connections on shutdown."""
    yield
    app.state.connection_provider.dispose()
    logger.info("Connection provider disposed")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        settings: Configuration to use; defaults to the environment-loaded settings.

    Returns:
        A fully configured FastAPI application instance.

    Raises:
        ConfigurationError: If no database connection string is configured.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level, echo_sql=settings.debug)

    connection_provider = ConnectionProvider(settings.database_url)

    app = FastAPI(
        title=settings.project_name,
        description=settings.description,
        version=settings.version,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.connection_provider = connection_provider

    # --- Middleware (last added runs outermost) ---
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    install_rate_limiting(app, settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(beneficiaries_router, prefix=API_PREFIX)
    app.include_router(document_types_router, prefix=API_PREFIX)

    logger.info(
        "%s %s ready (environment=%s, docs=%s)",
        settings.project_name,
        settings.version,
        settings.environment,
        settings.docs_enabled,
    )
    return app


app = create_app()
