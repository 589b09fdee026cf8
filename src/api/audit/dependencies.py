"""FastAPI dependencies for the audit bounded context."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from audit.application import AuditRecorder
from audit.infrastructure import HttpAuditLogSink, LoggingAuditLogSink
from infrastructure.settings import get_audit_settings
from shared_kernel.audit.ports import AuditLogSink

# Module-level sink shared by all requests (created on first use)
_sink: AuditLogSink | None = None


def get_audit_sink() -> AuditLogSink:
    """Get the process-wide audit log sink.

    Uses the HTTP sink when an ingestion URL is configured, otherwise
    falls back to writing events to the application log.

    Returns:
        The shared AuditLogSink instance
    """
    global _sink
    if _sink is None:
        settings = get_audit_settings()
        if settings.ingest_url:
            _sink = HttpAuditLogSink(
                base_url=settings.ingest_url,
                token=settings.token.get_secret_value(),
                datasource=settings.datasource,
                timeout_seconds=settings.timeout_seconds,
            )
        else:
            _sink = LoggingAuditLogSink()
    return _sink


def get_audit_recorder(
    sink: Annotated[AuditLogSink, Depends(get_audit_sink)],
) -> AuditRecorder:
    """Get an AuditRecorder for the current request."""
    return AuditRecorder(sink=sink)


async def close_audit_sink() -> None:
    """Close the shared sink on application shutdown."""
    global _sink
    if _sink is not None:
        await _sink.close()
        _sink = None
