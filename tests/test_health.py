"""Tests for health and basic HTTP endpoints."""

from unittest.mock import patch

from core.exceptions import BackendError


def test_health_returns_200(client):
    """GET /health should return 200."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json()["backend"] == "sqlite"


def test_health_reports_backend_failure(client):
    """Health endpoint returns 503 when the backend cannot be reached."""
    with patch("database.sqlite_backend.SQLiteBackend.ping", side_effect=BackendError("disk I/O error")):
        response = client.get("/health")
    assert response.status_code == 503
    assert response.get_json()["status"] == "unhealthy"
