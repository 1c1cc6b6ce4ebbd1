# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Builds a fresh application (with empty stores) per test
# - Provides admin tokens and API keys for authenticated requests
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ADMIN_USERNAME", "admin")
os.environ.setdefault("ADMIN_PASSWORD", "test-admin-password")
os.environ.setdefault("SECRET_KEY", "test-secret-key-0123456789")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("MAX_UPLOAD_SIZE_MB", "1")

import pytest
from fastapi.testclient import TestClient

from app.main import create_app

ADMIN_PASSWORD = os.environ["ADMIN_PASSWORD"]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def app():
    """A fully wired application with empty stores."""
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def admin_token(client):
    response = client.post(
        "/api/admin/login",
        json={"username": "admin", "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


def _create_key(client, admin_headers, **fields) -> str:
    response = client.post("/api/admin/api-keys", json=fields, headers=admin_headers)
    assert response.status_code == 201
    return response.json()["key"]


@pytest.fixture
def file_key(client, admin_headers):
    """API key value with file permission only."""
    return _create_key(client, admin_headers, name="files", file_permission=True)


@pytest.fixture
def text_key(client, admin_headers):
    """API key value with text permission only."""
    return _create_key(client, admin_headers, name="texts", text_permission=True)


@pytest.fixture
def create_key(client, admin_headers):
    """Factory for API keys with custom fields."""
    def factory(**fields) -> str:
        return _create_key(client, admin_headers, **fields)
    return factory
