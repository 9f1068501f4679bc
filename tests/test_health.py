"""Tests for the health check endpoint."""

import pytest
from fastapi.testclient import TestClient

from user_search.config import get_settings
from user_search.main import app
from user_search.services import get_database_client
from user_search_common.infra.database import DatabaseClient


@pytest.mark.unit
def test_health_reports_reachable_database(client: TestClient) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "version": app.version,
        "environment": get_settings().environment,
        "database": "ok",
        "message": "API is healthy",
    }


@pytest.mark.unit
def test_health_reports_unreachable_database(tmp_path) -> None:
    """The process stays healthy while the database is reported unavailable."""
    missing = tmp_path / "missing" / "users.db"
    database = DatabaseClient(f"sqlite:///{missing}")
    app.dependency_overrides[get_database_client] = lambda: database
    try:
        response = TestClient(app).get("/api/health")
    finally:
        app.dependency_overrides.clear()
        database.dispose()

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["database"] == "unavailable"
