"""
Pytest Configuration and Shared Fixtures.

Every test gets a fresh in-memory SQLite database behind the real app factory.
"""

import pytest
from fastapi.testclient import TestClient

from employee_directory.core.config import Settings
from employee_directory.db import build_engine
from employee_directory.main import create_app
from employee_directory.schemas import EmployeeIn
from employee_directory.store import EmployeeStore


@pytest.fixture
def settings():
    """Settings pointing at an in-memory SQLite database."""
    return Settings(_env_file=None, DATABASE_URL="sqlite://", LOG_LEVEL="DEBUG")


@pytest.fixture
def engine(settings):
    engine = build_engine(settings.sqlalchemy_url)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    """Store with the schema already in place."""
    store = EmployeeStore(engine)
    store.ensure_schema()
    return store


@pytest.fixture
def app(settings, engine):
    return create_app(settings, engine)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def make_employee():
    """Factory for validated create payloads."""
    def _make(nirc="A1234567", full_name="Ada Lovelace", position="Engineer", email="ada@example.com"):
        return EmployeeIn(nirc=nirc, full_name=full_name, position=position, email=email)
    return _make
