"""Audit log sink implementations."""

from audit.infrastructure.http_sink import HttpAuditLogSink
from audit.infrastructure.logging_sink import LoggingAuditLogSink

__all__ = [
    "HttpAuditLogSink",
    "LoggingAuditLogSink",
]
