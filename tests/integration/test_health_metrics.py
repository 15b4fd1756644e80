"""Integration tests for /healthz and /metrics endpoints."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from backend.app.api.routes.health import check_storage
from backend.app.db.engine import get_trip_repository
from backend.app.db.json_store import JsonStore
from backend.app.db.trips import JsonTripRepository
from backend.app.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client."""
    return TestClient(app)


class TestHealthEndpoint:
    """Test /healthz endpoint."""

    @patch("backend.app.api.routes.health.check_storage")
    def test_healthz_returns_200_when_storage_ok(
        self, mock_check_storage: MagicMock, client: TestClient
    ) -> None:
        """Test /healthz returns 200 when the data directory is usable."""
        mock_check_storage.return_value = (True, "ok")

        response = client.get("/healthz")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["components"]["storage"] == "ok"

    @patch("backend.app.api.routes.health.check_storage")
    def test_healthz_returns_503_when_storage_fails(
        self, mock_check_storage: MagicMock, client: TestClient
    ) -> None:
        """Test /healthz returns 503 when the data directory is unusable."""
        mock_check_storage.return_value = (False, "error: PermissionError")

        response = client.get("/healthz")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "degraded"
        assert data["components"]["storage"] == "error: PermissionError"

    @pytest.mark.asyncio
    async def test_check_storage_reports_os_errors(self, tmp_path: Path) -> None:
        """Test a data dir path blocked by a regular file is reported."""
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")

        ok, status = await check_storage(JsonStore(blocker / "data"))

        assert ok is False
        assert status.startswith("error: ")


class TestMetricsEndpoint:
    """Test /metrics endpoint."""

    def test_metrics_exposes_store_metrics(self, client: TestClient, tmp_path: Path) -> None:
        """Test mutation metrics appear after a write."""
        store = JsonStore(tmp_path / "data")
        app.dependency_overrides[get_trip_repository] = lambda: JsonTripRepository(store)
        try:
            response = client.post(
                "/trips",
                json={
                    "title": "Metrics",
                    "destination": "Hanoi",
                    "startDate": "2025-06-01",
                    "endDate": "2025-06-02",
                },
            )
            assert response.status_code == 201
        finally:
            app.dependency_overrides.clear()

        response = client.get("/metrics")

        assert response.status_code == 200
        assert "store_mutation_latency_ms" in response.text
        assert 'collection="trips.json"' in response.text
