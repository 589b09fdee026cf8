"""Application layer for the audit bounded context."""

from audit.application.recorder import AuditRecorder

__all__ = ["AuditRecorder"]
