"""
Shared test fixtures and configuration for the school admin tests.
"""
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from app import create_app
from app.config import TestConfig
from app.storage.document_store import DocumentStore


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path of a not-yet-created database file inside a temp directory."""
    return tmp_path / "data" / "db.json"


@pytest.fixture
def app(db_path: Path) -> Flask:
    """Create a Flask application bound to a temporary database file."""
    app = create_app(TestConfig, DATABASE_PATH=db_path)
    yield app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def store(db_path: Path) -> DocumentStore:
    """Create a DocumentStore on the temporary database path."""
    return DocumentStore(db_path)


@pytest.fixture
def seeded_students(store: DocumentStore) -> list:
    """Write three students straight to disk, bypassing the service layer."""
    students = [
        {"id": "s1", "name": "Citra Lestari", "class": "X-1", "email": "citra.l@email.com",
         "createdAt": "2024-01-01T00:00:00.000Z", "updatedAt": "2024-01-01T00:00:00.000Z"},
        {"id": "s2", "name": "ahmad Subagja", "class": "XII IPA 1", "email": "ahmad.s@email.com",
         "createdAt": "2024-01-02T00:00:00.000Z", "updatedAt": "2024-01-02T00:00:00.000Z"},
        {"id": "s3", "name": "Budi Santoso", "class": "XI IPS 3", "email": "budi.s@email.com",
         "createdAt": "2024-01-03T00:00:00.000Z", "updatedAt": "2024-01-03T00:00:00.000Z"},
    ]
    store.write_database({"students": students})
    return students

