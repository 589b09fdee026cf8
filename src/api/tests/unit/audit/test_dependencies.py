"""Unit tests for audit dependency providers."""

from unittest.mock import patch

import pytest
from pydantic import SecretStr

import audit.dependencies as audit_dependencies
from audit.infrastructure import HttpAuditLogSink, LoggingAuditLogSink
from infrastructure.settings import AuditSettings


@pytest.fixture(autouse=True)
def reset_sink():
    audit_dependencies._sink = None
    yield
    audit_dependencies._sink = None


class TestGetAuditSink:
    """Tests for get_audit_sink."""

    def test_logging_sink_without_ingest_url(self):
        with patch.object(
            audit_dependencies, "get_audit_settings", return_value=AuditSettings()
        ):
            sink = audit_dependencies.get_audit_sink()

        assert isinstance(sink, LoggingAuditLogSink)

    def test_http_sink_with_ingest_url(self):
        settings = AuditSettings(
            ingest_url="https://ingest.example.com", token=SecretStr("t")
        )
        with patch.object(
            audit_dependencies, "get_audit_settings", return_value=settings
        ):
            sink = audit_dependencies.get_audit_sink()

        assert isinstance(sink, HttpAuditLogSink)

    def test_sink_is_shared(self):
        with patch.object(
            audit_dependencies, "get_audit_settings", return_value=AuditSettings()
        ):
            assert audit_dependencies.get_audit_sink() is audit_dependencies.get_audit_sink()

    @pytest.mark.asyncio
    async def test_close_resets_sink(self):
        with patch.object(
            audit_dependencies, "get_audit_settings", return_value=AuditSettings()
        ):
            audit_dependencies.get_audit_sink()

        await audit_dependencies.close_audit_sink()

        assert audit_dependencies._sink is None
