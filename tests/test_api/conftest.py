"""Pytest fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.services.database import DatabaseService, get_db
from src.database import load_demo_suppliers


@pytest.fixture
def api_db():
    """In-memory database service with reference data and demo suppliers."""
    db = DatabaseService(":memory:")
    load_demo_suppliers(db.connect())
    yield db
    db.close()


@pytest.fixture
def client(api_db):
    """Create a TestClient for the FastAPI application backed by ``api_db``."""
    app.dependency_overrides[get_db] = lambda: api_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def acme_id():
    return "0b6f8a52-6c1d-4f7e-9a3b-2d5e8c1f4a10"


@pytest.fixture
def bundle_id():
    """Approved supplier that does not accept quote requests."""
    return "4fad2e96-a05b-4dbc-9e7f-6b9c2a5d8e54"


@pytest.fixture
def software_category_id():
    return "3f1c2a8e-5b7d-4c1e-9a2f-1d6e8b4c7a01"
