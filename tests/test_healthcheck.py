"""
Healthcheck tests.

These tests verify the basic Django setup is working correctly.
"""

import pytest
from django.test import Client


class TestHealthcheck:
    """Test the healthcheck endpoints."""

    def test_healthcheck_returns_200(self, client: Client):
        """Healthcheck endpoint should return 200 OK without credentials."""
        response = client.get("/health/")
        assert response.status_code == 200

    def test_healthcheck_returns_json(self, client: Client):
        response = client.get("/health/")
        data = response.json()
        assert data["status"] == "ok"
        assert data["service"] == "brandvoice-backend"

    def test_contract_health_is_public(self, client: Client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "contract_version": "1.0.0"}


class TestDjangoSetup:
    """Test that Django is configured correctly."""

    def test_django_can_import(self):
        import django
        assert django.VERSION >= (5, 0)

    def test_settings_loaded(self):
        from django.conf import settings
        assert settings.configured
        assert "brandvoice.core" in settings.INSTALLED_APPS
        assert "brandvoice.users" in settings.INSTALLED_APPS

    def test_database_configured(self):
        from django.conf import settings
        assert "default" in settings.DATABASES
        # In test mode, we use sqlite in-memory
        assert settings.DATABASES["default"]["ENGINE"] in (
            "django.db.backends.sqlite3",
            "django.db.backends.postgresql",
        )
