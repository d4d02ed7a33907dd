import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

from eventhub.main import app
from eventhub.models.enums import ViewMode


class TestAppConfiguration:
    """Test FastAPI app configuration."""

    def test_app_title(self):
        assert app.title == "EventHub Admin"

    def test_app_has_lifespan(self):
        assert app.router.lifespan_context is not None

    def test_cors_middleware_configured(self):
        middleware_types = [m.cls.__name__ for m in app.user_middleware]
        assert any("CORS" in name for name in middleware_types)

    def test_routes_registered(self):
        paths = app.openapi()["paths"]
        assert "/admin" in paths
        assert "/api/admin/events" in paths
        assert "/api/admin/events/{event_id}" in paths
        assert "/api/admin/dashboard" in paths


class TestHealthEndpoint:
    """Test the health check endpoint."""

    def test_health_endpoint_returns_ok(self):
        client = TestClient(app)
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestLifespan:
    """Test startup and shutdown of the dashboard view-model."""

    @patch.dict("os.environ", {"DASHBOARD_LOADING_DELAY": "60"})
    @patch("eventhub.main.setup_telemetry")
    @patch("eventhub.main.setup_logging")
    def test_startup_activates_dashboard(self, mock_logging, mock_telemetry):
        """The dashboard starts loading on startup and is torn down cleanly on shutdown."""
        with TestClient(app) as client:
            mock_logging.assert_called_once()
            mock_telemetry.assert_called_once()
            assert mock_telemetry.call_args[0][0] is app
            settings = mock_telemetry.call_args[0][1]
            assert mock_logging.call_args[0][0] is settings
            dashboard = app.state.dashboard
            assert dashboard.loading is True
            assert dashboard.view_mode == ViewMode.OVERVIEW

            snapshot = client.get("/api/admin/dashboard").json()
            assert snapshot["loading"] is True
            assert snapshot["visible_sections"] == []

        # Shutdown happened before the timer fired
        assert dashboard.loading is True

    @patch.dict("os.environ", {"DASHBOARD_LOADING_DELAY": "0"})
    @patch("eventhub.main.setup_telemetry")
    @patch("eventhub.main.setup_logging")
    def test_startup_uses_configured_delay(self, mock_logging, mock_telemetry):
        with TestClient(app):
            assert app.state.dashboard.loading_delay == 0
