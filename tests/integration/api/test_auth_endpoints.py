"""Integration tests for authentication endpoints."""

import jwt
from fastapi.testclient import TestClient

from tests.integration.api.conftest import TEST_APP_ID, TEST_TOKEN_TTL


def _register(test_client: TestClient, api_v1_prefix: str, data: dict) -> int:
    response = test_client.post(f"{api_v1_prefix}/auth/register", json=data)
    assert response.status_code == 201
    return response.json()["user_id"]


class TestAuthRegister:
    """Tests for POST /api/v1/auth/register."""

    def test_register_success(self, test_client, api_v1_prefix, registered_user_data):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register", json=registered_user_data
        )

        assert response.status_code == 201
        assert isinstance(response.json()["user_id"], int)
        assert response.json()["user_id"] >= 1

    def test_register_assigns_distinct_ids(self, test_client, api_v1_prefix):
        first = _register(test_client, api_v1_prefix, {"email": "a@x.com", "password": "p1"})
        second = _register(test_client, api_v1_prefix, {"email": "b@x.com", "password": "p2"})

        assert first != second

    def test_register_duplicate_email(self, test_client, api_v1_prefix, registered_user_data):
        _register(test_client, api_v1_prefix, registered_user_data)

        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": registered_user_data["email"], "password": "another"},
        )

        assert response.status_code == 409
        assert response.json() == {"detail": "user already exists", "code": "USER_EXISTS"}

    def test_register_after_duplicate_still_works(
        self, test_client, api_v1_prefix, registered_user_data
    ):
        _register(test_client, api_v1_prefix, registered_user_data)
        test_client.post(f"{api_v1_prefix}/auth/register", json=registered_user_data)

        _register(test_client, api_v1_prefix, {"email": "c@x.com", "password": "p"})

    def test_register_empty_email(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register", json={"email": "", "password": "secret"}
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "email is required", "code": "INVALID_ARGUMENT"}

    def test_register_missing_password(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register", json={"email": "a@x.com"}
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "password is required", "code": "INVALID_ARGUMENT"}


class TestAuthLogin:
    """Tests for POST /api/v1/auth/login."""

    def test_login_issues_token_for_app(
        self, test_client, api_v1_prefix, registered_user_data, registered_app
    ):
        user_id = _register(test_client, api_v1_prefix, registered_user_data)

        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={**registered_user_data, "app_id": TEST_APP_ID},
        )

        assert response.status_code == 200
        claims = jwt.decode(
            response.json()["token"], registered_app.public_key, algorithms=["RS256"]
        )
        assert claims["uid"] == user_id
        assert claims["email"] == registered_user_data["email"]
        assert claims["app_id"] == TEST_APP_ID
        assert claims["exp"] - claims["iat"] == int(TEST_TOKEN_TTL.total_seconds())

    def test_wrong_password(self, test_client, api_v1_prefix, registered_user_data):
        _register(test_client, api_v1_prefix, registered_user_data)

        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={
                "email": registered_user_data["email"],
                "password": "wrong",
                "app_id": TEST_APP_ID,
            },
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "invalid credentials", "code": "INVALID_CREDENTIALS"}

    def test_unknown_email_looks_like_wrong_password(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": "nobody@x.com", "password": "secret123", "app_id": TEST_APP_ID},
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "invalid credentials", "code": "INVALID_CREDENTIALS"}

    def test_unknown_app(self, test_client, api_v1_prefix, registered_user_data):
        _register(test_client, api_v1_prefix, registered_user_data)

        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={**registered_user_data, "app_id": 99},
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "invalid app id", "code": "INVALID_APP_ID"}

    def test_non_positive_app_id(self, test_client, api_v1_prefix, registered_user_data):
        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={**registered_user_data, "app_id": 0},
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "app_id is invalid", "code": "INVALID_ARGUMENT"}

    def test_app_id_beyond_int64(self, test_client, api_v1_prefix, registered_user_data):
        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={**registered_user_data, "app_id": 2**63},
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "app_id is invalid", "code": "INVALID_ARGUMENT"}

    def test_non_integer_app_id(self, test_client, api_v1_prefix, registered_user_data):
        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={**registered_user_data, "app_id": "abc"},
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "app_id is invalid", "code": "INVALID_ARGUMENT"}

    def test_missing_app_id(self, test_client, api_v1_prefix, registered_user_data):
        response = test_client.post(f"{api_v1_prefix}/auth/login", json=registered_user_data)

        assert response.status_code == 400
        assert response.json() == {"detail": "app_id is required", "code": "INVALID_ARGUMENT"}

    def test_empty_password(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": "a@x.com", "password": "", "app_id": TEST_APP_ID},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ARGUMENT"


class TestIsAdmin:
    """Tests for GET /api/v1/auth/users/{user_id}/is-admin."""

    def test_new_user_is_not_admin(self, test_client, api_v1_prefix, registered_user_data):
        user_id = _register(test_client, api_v1_prefix, registered_user_data)

        response = test_client.get(f"{api_v1_prefix}/auth/users/{user_id}/is-admin")

        assert response.status_code == 200
        assert response.json() == {"is_admin": False}

    def test_unknown_user(self, test_client, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/auth/users/42/is-admin")

        assert response.status_code == 404
        assert response.json() == {"detail": "user not found", "code": "USER_NOT_FOUND"}

    def test_non_positive_user_id(self, test_client, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/auth/users/0/is-admin")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ARGUMENT"

    def test_user_id_beyond_int64(self, test_client, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/auth/users/{2**63}/is-admin")

        assert response.status_code == 400
        assert response.json() == {"detail": "user_id is invalid", "code": "INVALID_ARGUMENT"}

    def test_largest_user_id_is_accepted(self, test_client, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/auth/users/{2**63 - 1}/is-admin")

        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"


class TestHealth:
    def test_health(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
