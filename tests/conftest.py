"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from user_search.main import app
from user_search.services import get_database_client
from user_search_common.infra.database import DatabaseClient
from user_search_common.models.user import UserEntity


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks fast, isolated tests")
    config.addinivalue_line(
        "markers", "integration: marks tests that go through the HTTP app and a real database"
    )


@pytest.fixture
def database() -> Iterator[DatabaseClient]:
    """Create an in-memory SQLite database with the schema in place."""
    client = DatabaseClient("sqlite://")
    client.create_schema()
    yield client
    client.dispose()


@pytest.fixture
def session(database: DatabaseClient) -> Iterator[Session]:
    """Open a session on the test database."""
    with database.session() as session:
        yield session


@pytest.fixture
def seeded_users(database: DatabaseClient) -> list[UserEntity]:
    """Insert Alice, Bob and Alice, in that order."""
    with database.session() as session:
        users = [UserEntity(name="Alice"), UserEntity(name="Bob"), UserEntity(name="Alice")]
        session.add_all(users)
    return users


@pytest.fixture
def client(database: DatabaseClient) -> Iterator[TestClient]:
    """Create a FastAPI test client wired to the test database."""
    app.dependency_overrides[get_database_client] = lambda: database
    yield TestClient(app)
    app.dependency_overrides.clear()
