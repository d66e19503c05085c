"""FastAPI dependency injection for the BSE API.

Provides dependencies for:
- Database sessions
- Authentication (current user from JWT claims)
- Repository factory and image storage
- Service instances
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from bse.application.ports import CurrentUser, ImageStorage
from bse.application.services import AuthenticationService
from bse.domain.user import UserRole
from bse.infrastructure.persistence.sqlalchemy.engine import create_engine
from bse.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from bse.infrastructure.storage import LocalImageStorage
from bse.presentation.api.config import get_api_settings
from bse_auth import InvalidTokenError, JWTService, PasswordHashingService
from bse_config.settings import Settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_api_settings().database_url

    # Ensure data directory exists for file-based SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    return create_engine(get_database_url())


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.
    Routers commit on success and roll back on failure.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def get_repository_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
    """Get a repository factory bound to the request's session."""
    return SQLAlchemyRepositoryFactory(session)


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


# -----------------------------------------------------------------------------
# Image Storage
# -----------------------------------------------------------------------------


def get_image_storage(settings: SettingsDep) -> ImageStorage:
    """Get the image storage rooted at the configured web root."""
    return LocalImageStorage(
        root=settings.storage_root,
        max_file_size=settings.upload_max_file_size_bytes,
        allowed_extensions=settings.allowed_extensions,
    )


ImageStorageDep = Annotated[ImageStorage, Depends(get_image_storage)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        expire_days=settings.jwt_expiration_days,
    )


def get_password_service() -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService()


async def get_authentication_service(
    factory: RepoFactory,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """Get authentication service with all dependencies."""
    return AuthenticationService.from_factory(
        factory,
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> CurrentUser:
    """
    FastAPI dependency to get the current authenticated user from JWT.

    Identity and role are taken from the verified token claims; the
    database is not consulted.

    Raises
    ------
    HTTPException
        401 if the token is missing, invalid, expired or carries an
        unknown role
    """
    if credentials is None:
        raise _unauthorized("Authentication required")

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise _unauthorized("Invalid or expired token") from e

    try:
        role = UserRole(payload.role)
    except ValueError as e:
        logger.warning("Token for user %s has unknown role %r", payload.user_id, payload.role)
        raise _unauthorized("Invalid or expired token") from e

    return CurrentUser(
        user_id=payload.user_id,
        email=payload.email,
        full_name=payload.full_name,
        role=role,
    )


# Type alias for injected current user
AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
