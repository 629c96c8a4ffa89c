"""FastAPI application factory.

Creates and configures the FastAPI application with the auth router
and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI

from sso.infrastructure.persistence.sqlalchemy import create_tables
from sso.presentation.api.config import get_api_settings
from sso.presentation.api.dependencies import get_engine
from sso.presentation.api.exception_handlers import setup_exception_handlers
from sso.presentation.api.routers import auth_router
from sso_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def configure_logging(level: str) -> None:
    """Configure application logging.

    Sets up logging for the sso packages with:
    - Console output with timestamps and module names
    - Configurable log level for sso modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("sso").setLevel(log_level)
    logging.getLogger("sso_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Single sign-on for registered client apps.

- Register accounts with email/password
- Login for an app to obtain an RS256 token signed with that app's key
- Check whether a user holds the admin role

Passwords are stored as Argon2id hashes with a per-user salt.
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting SSO API v%s...", API_VERSION)
    engine = get_engine(app.state.settings.database_url)
    await create_tables(engine)
    yield
    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down SSO API...")
    await engine.dispose()
    logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoint routers."""
    v1_router = APIRouter()
    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on first app creation (not on module import)
    configure_logging(settings.effective_log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Single sign-on service issuing **RS256** tokens per client app.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.state.settings = settings
    app.dependency_overrides[get_api_settings] = lambda: settings

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint.

        Unversioned for load balancer/monitoring compatibility.
        """
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

    return app
