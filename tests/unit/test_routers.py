"""
Unit tests for api/routers.

Tests that routers are correctly configured and wired into the application.
"""

import pytest
from fastapi.testclient import TestClient

from backend.main import create_app
from backend.settings import Settings, get_settings


class TestRouterInclusion:
    """Test that all routers are correctly included in the app."""

    @pytest.fixture
    def test_app(self):
        """Create a test app with routers."""
        settings = Settings(environment="test", _env_file=None)
        return create_app(settings=settings)

    def test_openapi_tags(self, test_app):
        """Each router contributes its tag to the OpenAPI schema."""
        paths = test_app.openapi()["paths"]
        assert "Health" in paths["/health"]["get"]["tags"]
        assert "Scores" in paths["/scores/parse"]["post"]["tags"]
        assert "Results" in paths["/athletes/{athlete_id}/today"]["get"]["tags"]

    def test_openapi_schema_generated(self, test_app):
        """OpenAPI schema should be generated without errors."""
        openapi = test_app.openapi()
        assert "openapi" in openapi
        assert "info" in openapi
        assert "/athletes/{athlete_id}/custom" in openapi["paths"]
        assert "/athletes/{athlete_id}/workouts/{workout_id}/result" in openapi["paths"]


class TestHealthRouter:
    """Test health router endpoints."""

    @pytest.fixture
    def client(self):
        """Create a test client with Supabase unconfigured."""
        settings = Settings(environment="test", _env_file=None)
        app = create_app(settings=settings)
        app.dependency_overrides[get_settings] = lambda: Settings(
            environment="test",
            supabase_url=None,
            supabase_service_role_key=None,
            supabase_anon_key=None,
            _env_file=None,
        )
        return TestClient(app)

    def test_health_returns_ok_status(self, client):
        """Health endpoint should return status ok."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {
            "status": "ok",
            "environment": "test",
            "database_configured": False,
        }

    def test_health_method_not_allowed(self, client):
        """Health endpoint should only accept GET."""
        response = client.post("/health")
        assert response.status_code == 405


class TestStorageNotConfigured:
    """Result endpoints without Supabase credentials."""

    def test_results_return_503(self, monkeypatch):
        from api import deps

        settings = Settings(
            environment="test",
            supabase_url=None,
            supabase_service_role_key=None,
            supabase_anon_key=None,
            _env_file=None,
        )
        monkeypatch.setattr(deps, "_get_settings", lambda: settings)
        deps.get_supabase_client.cache_clear()
        try:
            client = TestClient(create_app(settings=settings))
            response = client.get("/athletes/athlete-1/results")
        finally:
            deps.get_supabase_client.cache_clear()

        assert response.status_code == 503
