"""Pytest fixtures for API tests.

Each test gets its own SQLite database file and storage root under
``tmp_path``. The schema is created up front in a separate event loop,
and the app opens fresh connections (NullPool) inside TestClient's loop.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

import bse.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from bse.infrastructure.persistence.sqlalchemy.engine import create_engine
from bse.infrastructure.persistence.sqlalchemy.models.base import Base
from bse.presentation.api.app import API_PREFIX, create_app
from bse.presentation.api.dependencies import get_db_session, get_password_service
from bse_auth import PasswordHashingService
from bse_config.settings import Settings

TEST_PASSWORD = "secret123"


@pytest.fixture
def api_prefix() -> str:
    return API_PREFIX


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        database_url_override=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        storage_root=tmp_path / "wwwroot",
        log_level="WARNING",
    )


def _setup_test_database(database_url: str) -> None:
    """Create tables in a fresh event loop to avoid clashing with TestClient's."""

    async def _setup():
        engine = create_engine(database_url, poolclass=NullPool)
        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        finally:
            await engine.dispose()

    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(_setup())
    finally:
        loop.close()


@pytest.fixture
def app(api_settings):
    _setup_test_database(api_settings.database_url)

    app = create_app(settings=api_settings, use_lifespan=False)

    engine = create_engine(api_settings.database_url, poolclass=NullPool)
    test_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    # Low bcrypt work factor keeps the suite fast
    app.dependency_overrides[get_password_service] = lambda: PasswordHashingService(
        rounds=4
    )
    return app


@pytest.fixture
def test_client(app) -> TestClient:
    return TestClient(app)


def _sign_up(
    client: TestClient,
    email: str,
    full_name: str = "Test User",
    role: str = "User",
) -> dict:
    """Create an account and return its Authorization header."""
    response = client.post(
        f"{API_PREFIX}/auth/signup",
        json={
            "email": email,
            "password": TEST_PASSWORD,
            "fullName": full_name,
            "role": role,
        },
    )
    assert response.status_code == 201, (
        f"Sign-up failed: {response.status_code} - {response.text}"
    )
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def sign_up(test_client):
    """Callable that creates an account and returns its auth headers."""

    def _create(email: str, full_name: str = "Test User", role: str = "User") -> dict:
        return _sign_up(test_client, email, full_name, role)

    return _create


@pytest.fixture
def alice_headers(test_client) -> dict:
    return _sign_up(test_client, "alice@example.com", "Alice Author")


@pytest.fixture
def bob_headers(test_client) -> dict:
    return _sign_up(test_client, "bob@example.com", "Bob Reader")


@pytest.fixture
def admin_headers(test_client) -> dict:
    return _sign_up(test_client, "admin@example.com", "Ada Admin", role="Admin")
