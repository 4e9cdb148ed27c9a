# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides an in-memory MongoDB collection (mongomock) and API clients
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("MONGODB_URI", "mongodb://test-host:27017")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import mongomock
import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from lib.person_store import COLLECTION, DATABASE, PersonStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def people_collection():
    """Empty in-memory `testdb.people` collection."""
    return mongomock.MongoClient()[DATABASE][COLLECTION]


@pytest.fixture
def store(people_collection):
    """PersonStore over the in-memory collection."""
    return PersonStore(people_collection)


@pytest.fixture
def client(store):
    """API client with default (all-500) error reporting."""
    with TestClient(create_app(store=store, strict_errors=False)) as test_client:
        yield test_client


@pytest.fixture
def strict_client(store):
    """API client with strict error reporting (400/404)."""
    with TestClient(create_app(store=store, strict_errors=True)) as test_client:
        yield test_client


@pytest.fixture
def sample_person_dict():
    """Sample request body for creating a person."""
    return {"name": "Ann", "age": 30, "address": "1 Main St"}
