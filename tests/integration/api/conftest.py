"""Pytest fixtures for API integration tests."""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from sso.domain.app import App
from sso.infrastructure.persistence.sqlalchemy import AppRepositorySQLAlchemy
from sso.presentation.api.app import API_V1_PREFIX, create_app
from sso.presentation.api.dependencies import get_db_session, get_password_service
from sso_auth import PasswordHashingService
from sso_config.settings import Settings
from tests.conftest import TEST_MEMORY_COST_KIB

TEST_APP_ID = 1
TEST_TOKEN_TTL = timedelta(hours=1)


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        _env_file=None,
        storage_path="unused-in-tests.db",
        token_ttl=TEST_TOKEN_TTL,
        api_timeout=timedelta(seconds=5),
        api_debug=True,
    )


@pytest.fixture
async def registered_app(session_maker, key_pair) -> App:
    """Provision the client app logins are made for."""
    app = App(
        id=TEST_APP_ID,
        name="Test",
        private_key=key_pair.private_key,
        public_key=key_pair.public_key,
    )
    async with session_maker() as session:
        await AppRepositorySQLAlchemy(session).upsert(app)
        await session.commit()
    return app


@pytest.fixture
def app(api_settings, session_maker):
    """FastAPI app wired to the in-memory database."""
    application = create_app(settings=api_settings)

    # Override the database session dependency
    async def override_get_db_session():
        async with session_maker() as session:
            yield session

    application.dependency_overrides[get_db_session] = override_get_db_session
    application.dependency_overrides[get_password_service] = lambda: PasswordHashingService(
        memory_cost=TEST_MEMORY_COST_KIB
    )
    return application


@pytest.fixture
def test_client(app, registered_app) -> TestClient:
    """Create a test client with an in-memory database and one app."""
    return TestClient(app)


@pytest.fixture
def registered_user_data() -> dict:
    """Test user registration data."""
    return {
        "email": "a@x.com",
        "password": "secret123",
    }
