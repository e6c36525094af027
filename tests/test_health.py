"""Tests for health endpoints."""

from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from app.main import app


class TestLivenessEndpoint:
    """Tests for /health liveness endpoint."""

    def test_health_check_returns_ok(self):
        """Liveness endpoint returns 200 with status ok."""
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/health")
            assert response.status_code == 200
            assert response.json() == {"status": "ok"}


class TestReadinessEndpoint:
    """Tests for /health/ready readiness endpoint."""

    def test_readiness_all_ok(self, mock_db_session):
        """Readiness returns 200 when the database and tables are available."""
        with patch("app.routes.health.AsyncSessionLocal", return_value=mock_db_session):
            with TestClient(app, raise_server_exceptions=False) as client:
                response = client.get("/health/ready")

                assert response.status_code == 200
                data = response.json()
                assert data["status"] == "ok"
                assert data["checks"] == {"database": "ok", "schema": "ok"}

    def test_readiness_db_failure(self, mock_db_session):
        """Readiness returns 503 when database is unavailable."""
        mock_db_session.execute = AsyncMock(side_effect=Exception("Connection refused"))

        with patch("app.routes.health.AsyncSessionLocal", return_value=mock_db_session):
            with TestClient(app, raise_server_exceptions=False) as client:
                response = client.get("/health/ready")

                assert response.status_code == 503
                assert "error" in response.json()["checks"]["database"]

    def test_readiness_schema_missing(self, mock_db_session):
        """Readiness returns 503 when import tables have not been created."""
        mock_db_session.run_sync = AsyncMock(return_value=["contracts", "compliance_tasks"])

        with patch("app.routes.health.AsyncSessionLocal", return_value=mock_db_session):
            with TestClient(app, raise_server_exceptions=False) as client:
                response = client.get("/health/ready")

                assert response.status_code == 503
                checks = response.json()["checks"]
                assert checks["database"] == "ok"
                assert checks["schema"] == "missing: contracts, compliance_tasks"
