"""Shared fixtures for end-to-end tests."""

import pytest
from fastapi.testclient import TestClient

from circle.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by a fresh in-memory container."""
    app_instance = create_app(container=build_test_container())
    return TestClient(app_instance)


@pytest.fixture
def sign_up(client):
    """Register a user and return their Authorization header."""

    def _sign_up(username: str, password: str = "s3cret") -> dict[str, str]:
        response = client.post(
            "/users",
            json={
                "username": username,
                "email": f"{username}@example.com",
                "password": password,
            },
        )
        assert response.status_code == 201
        return {"Authorization": f"Bearer {response.json()['authToken']}"}

    return _sign_up
