"""Tests for health check endpoints."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from api import app
from api.dependencies import get_container


client = TestClient(app)


@pytest.fixture
def mock_db():
    db = MagicMock()
    get_container()._db = db
    return db


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self):
        """Health endpoint should return 200 with status."""
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"

    def test_health_response_structure(self):
        """Health response should have correct structure."""
        assert set(client.get("/api/health").json().keys()) == {"status", "version"}

    def test_readiness_check(self, mock_db):
        """Readiness endpoint should run a head-only count."""
        response = client.get("/api/ready")

        assert response.status_code == 200
        assert response.json() == {
            "status": "ready",
            "database": "connected",
            "auth_client": "not initialized",
        }
        mock_db.table.assert_called_once_with("artworks")
        mock_db.table.return_value.select.assert_called_once_with("id", count="exact", head=True)

    def test_readiness_database_down(self, mock_db):
        """Readiness endpoint should answer 503 when the database fails."""
        mock_db.table.return_value.select.return_value.execute.side_effect = ConnectionError("refused")

        response = client.get("/api/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not ready"
        assert response.json()["database"] == "unavailable"
