# /tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from club_admin.core.config import Settings
from club_admin.main import create_app
from club_admin.services.database_service import DatabaseService


@pytest.fixture
def db_service():
    """A NEW, EMPTY DatabaseService for each test function."""
    return DatabaseService()


@pytest.fixture
def app():
    """A freshly built app with only the admin account seeded."""
    return create_app(Settings(seed_sample_data=False, log_level="WARNING"))


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_client(client):
    """A client that is already logged in as the seeded admin."""
    response = client.post("/api/auth/login", json={"username": "admin", "password": "password"})
    assert response.status_code == 200
    return client
