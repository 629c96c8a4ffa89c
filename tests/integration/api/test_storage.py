"""Integration tests for the API's own database wiring."""

import sqlite3

import pytest
from fastapi.testclient import TestClient

from sso.presentation.api.app import API_V1_PREFIX, create_app
from sso.presentation.api.dependencies import get_password_service
from sso_auth import PasswordHashingService
from sso_config.settings import Settings
from tests.conftest import TEST_MEMORY_COST_KIB
from tests.integration.api.conftest import TEST_TOKEN_TTL


@pytest.fixture
def storage_path(tmp_path):
    return tmp_path / "data" / "sso.db"


@pytest.fixture
def file_backed_app(storage_path):
    """App using the real session dependency on a file database."""
    settings = Settings(
        _env_file=None,
        storage_path=str(storage_path),
        token_ttl=TEST_TOKEN_TTL,
    )
    application = create_app(settings=settings)
    application.dependency_overrides[get_password_service] = lambda: PasswordHashingService(
        memory_cost=TEST_MEMORY_COST_KIB
    )
    return application


class TestSettingsStoragePath:
    def test_startup_creates_schema_at_configured_path(self, file_backed_app, storage_path):
        with TestClient(file_backed_app):
            pass

        with sqlite3.connect(storage_path) as conn:
            tables = {
                row[0]
                for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
            }
        assert {"users", "apps"} <= tables

    def test_registered_user_lands_in_configured_database(
        self, file_backed_app, storage_path
    ):
        with TestClient(file_backed_app) as client:
            response = client.post(
                f"{API_V1_PREFIX}/auth/register",
                json={"email": "a@x.com", "password": "secret123"},
            )

        assert response.status_code == 201
        with sqlite3.connect(storage_path) as conn:
            rows = conn.execute("SELECT id, email FROM users").fetchall()
        assert rows == [(response.json()["user_id"], "a@x.com")]
