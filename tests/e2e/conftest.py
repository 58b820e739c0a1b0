"""Shared fixtures for end-to-end tests."""

import pytest
from fastapi.testclient import TestClient

from agora.interface.api.app import create_app
from agora.util.di.container import setup_di
from tests.di import build_test_container
from tests.factories import auth_headers


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


@pytest.fixture
def author():
    return auth_headers("Policy Author")


@pytest.fixture
def published_policy(client, author):
    """Policy published through the API, returns its ID."""
    response = client.post(
        "/policies",
        json={"title": "Safer Streets Act", "content": "Lower urban speed limits."},
        headers=author,
    )
    assert response.status_code == 201
    return response.json()["policy_id"]
