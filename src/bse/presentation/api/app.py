"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, static upload serving and exception handlers.

All API endpoints live under the /api prefix. The health check endpoint
is served at /health and uploaded images at /uploads.

Run with:
    uvicorn bse.presentation.api.app:create_app --factory
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from pathlib import Path
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.ext.asyncio import AsyncEngine

from bse.infrastructure.persistence.sqlalchemy.models import Base
from bse.infrastructure.storage import UPLOADS_DIR
from bse.presentation.api.config import get_api_settings
from bse.presentation.api.dependencies import get_engine
from bse.presentation.api.exception_handlers import setup_exception_handlers
from bse.presentation.api.routers import auth_router, blogs_router
from bse.presentation.api.schemas.common import HealthResponse
from bse_config.settings import Settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_name: str = "INFO") -> None:
    """Configure application logging.

    Sets up logging for the bse packages with:
    - Console output with timestamps and module names
    - Configurable log level (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("bse").setLevel(log_level)
    logging.getLogger("bse_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

# API version info
API_VERSION = "1.0.0"
API_PREFIX = "/api"

# OpenAPI tags metadata for documentation
OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Account creation and sign-in.

- Passwords are hashed with bcrypt
- Successful calls return a JWT bearer token with its expiry
- Send it as `Authorization: Bearer <token>` on protected endpoints
""",
    },
    {
        "name": "Blogs",
        "description": """Blog posts with image attachments.

**Reading** is public and paginated (newest first).

**Writing** requires a bearer token:
- Any signed-in user can create posts
- Only the author or an `Admin` can update or delete a post
- Updates append new images and keep existing ones
- Images: jpg, jpeg, png, gif, webp; at most 5 MB each
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting BSE API v%s...", API_VERSION)
    engine = get_engine()
    await _init_database_schema(engine)
    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down BSE API...")
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Initialize database schema (if not existent) and verify connectivity."""
    logger.info("Initializing database schema...")
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    logger.info("Database schema initialized successfully")


def create_api_router() -> APIRouter:
    """Create the API router with all endpoints mounted."""
    api_router = APIRouter()
    api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    api_router.include_router(blogs_router, prefix="/blogs", tags=["Blogs"])
    return api_router


def _mount_uploads(app: FastAPI, storage_root: Path) -> None:
    """Serve stored images so the URLs returned by the API resolve."""
    uploads_dir = Path(storage_root) / UPLOADS_DIR
    uploads_dir.mkdir(parents=True, exist_ok=True)
    app.mount(
        f"/{UPLOADS_DIR}",
        StaticFiles(directory=uploads_dir),
        name=UPLOADS_DIR,
    )


def create_app(settings: Settings | None = None, use_lifespan: bool = True) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.
    use_lifespan
        Whether to create tables and dispose the shared engine on
        startup/shutdown. Tests that supply their own session turn it off.

    Returns
    -------
    Configured FastAPI application instance.
    """
    overridden = settings is not None
    if settings is None:
        settings = get_api_settings()

    # Configure logging on first app creation (not on module import)
    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "Marketing site backend with **sign-up/sign-in** and a "
            "**blog** with image attachments."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan if use_lifespan else None,
        openapi_tags=OPENAPI_TAGS,
    )

    # Wildcard origins cannot be combined with credentials
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if overridden:
        app.dependency_overrides[get_api_settings] = lambda: settings

    setup_exception_handlers(app)

    app.include_router(create_api_router(), prefix=API_PREFIX)
    _mount_uploads(app, settings.storage_root)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers and monitoring."""
        return HealthResponse(status="healthy", version=API_VERSION)

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_PREFIX,
            "endpoints": {
                "health": "/health",
                "auth": f"{API_PREFIX}/auth",
                "blogs": f"{API_PREFIX}/blogs",
                "uploads": f"/{UPLOADS_DIR}",
            },
        }

    return app
