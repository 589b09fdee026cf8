"""Unit tests for infrastructure settings."""

import pytest
from pydantic import ValidationError

from infrastructure.settings import AuditSettings, AuthSettings, DatabaseSettings


class TestDatabaseSettingsPoolConfiguration:
    """Tests for connection pool configuration."""

    def test_pool_max_must_be_greater_than_or_equal_to_min(self):
        """Should validate max >= min."""
        with pytest.raises(ValidationError) as exc_info:
            DatabaseSettings(pool_min_connections=10, pool_max_connections=5)

        assert "pool_max_connections" in str(exc_info.value)

    def test_pool_max_equal_to_min_is_valid(self):
        settings = DatabaseSettings(pool_min_connections=5, pool_max_connections=5)
        assert settings.pool_max_connections == 5

    def test_pool_min_must_be_positive(self):
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_min_connections=0)


class TestDatabaseSettingsConnectionString:
    """Tests for the loggable connection string."""

    def test_omits_password(self):
        settings = DatabaseSettings(
            host="db", username="keydeck", password="s3cret", database="keydeck"
        )

        assert settings.connection_string == "postgresql://keydeck@db:5432/keydeck"
        assert "s3cret" not in settings.connection_string

    def test_explicit_url_drops_credentials(self):
        settings = DatabaseSettings(url="postgresql+asyncpg://u:pw@db:5432/keydeck")

        assert settings.connection_string == "db:5432/keydeck"


class TestEnvironmentPrefixes:
    """Tests for environment variable loading."""

    def test_audit_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("KEYDECK_AUDIT_INGEST_URL", "https://ingest.example.com")
        monkeypatch.setenv("KEYDECK_AUDIT_TOKEN", "token-123")

        settings = AuditSettings()

        assert settings.ingest_url == "https://ingest.example.com"
        assert settings.token.get_secret_value() == "token-123"
        assert settings.datasource == "audit_logs"

    def test_auth_settings_defaults(self, monkeypatch):
        monkeypatch.delenv("KEYDECK_AUTH_SESSION_COOKIE", raising=False)
        monkeypatch.delenv("KEYDECK_AUTH_TENANT_HEADER", raising=False)

        settings = AuthSettings()

        assert settings.session_cookie == "keydeck_session"
        assert settings.tenant_header == "X-Tenant-ID"

    def test_audit_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            AuditSettings(timeout_seconds=0)
