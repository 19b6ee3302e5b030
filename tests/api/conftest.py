"""Fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

import catalog_admin.infrastructure.memory as memory
from catalog_admin.infrastructure.config import settings
from catalog_admin.infrastructure.memory import InMemoryDatabase
from catalog_admin.main import app


@pytest.fixture(autouse=True)
def use_test_catalog(catalog_db: InMemoryDatabase):
    """Serve the test catalog from the process-wide store."""
    memory._database = catalog_db
    yield
    memory._database = None


@pytest.fixture
def client() -> TestClient:
    """Create test client without authentication."""
    return TestClient(app)


@pytest.fixture
def auth_client() -> TestClient:
    """Create test client with authentication."""
    return TestClient(
        app,
        headers={"Authorization": f"Bearer {settings.admin_api_key}"},
    )
