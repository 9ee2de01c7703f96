"""Pytest configuration and fixtures for Supplier Directory tests."""

import json

import pytest
import requests

from src.database import get_memory_connection, initialize_database, load_demo_suppliers
from src.selection.storage import JsonFileStore, MemoryStore


@pytest.fixture
def test_db():
    """In-memory DuckDB with the full schema, reference data and demo suppliers."""
    conn = get_memory_connection()
    initialize_database(conn)
    load_demo_suppliers(conn)
    yield conn
    conn.close()


@pytest.fixture
def memory_store():
    """Empty in-process store."""
    return MemoryStore()


@pytest.fixture
def file_store(tmp_path):
    """Store backed by a JSON file in a temporary directory."""
    return JsonFileStore(tmp_path / "local_storage.json")


def _make_response(payload=None, status_code=200, text=None):
    response = requests.Response()
    response.status_code = status_code
    body = text if text is not None else json.dumps(payload)
    response._content = body.encode("utf-8")
    response.headers["Content-Type"] = "application/json"
    return response


class FakeSession:
    """Stand-in for ``requests.Session`` returning queued responses.

    Each queued item is either a ``requests.Response`` or an exception to raise.
    """

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []
        self.closed = False

    def queue(self, response):
        self.responses.append(response)

    def get(self, url, timeout=None, **kwargs):
        self.calls.append(url)
        if not self.responses:
            raise requests.exceptions.ConnectionError("no response queued")
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self):
        self.closed = True


@pytest.fixture
def make_response():
    """Factory for real ``requests.Response`` objects carrying a JSON (or raw text) body."""
    return _make_response


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def listing_envelope():
    """Successful listing envelope with two suppliers."""
    return {
        "success": True,
        "data": [
            {"id": "s-1", "name": "Acme Removals CRM", "slug": "acme-removals-crm"},
            {"id": "s-2", "name": "MoveSure Insurance", "slug": "movesure-insurance"},
        ],
        "pagination": {
            "page": 2,
            "limit": 2,
            "total": 5,
            "totalPages": 3,
            "hasNext": True,
            "hasPrev": True,
        },
    }
