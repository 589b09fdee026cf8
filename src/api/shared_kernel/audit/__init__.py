"""Audit event contract shared by producers and the audit log sink."""

from shared_kernel.audit.ports import AuditLogSink, AuditRecorderPort
from shared_kernel.audit.value_objects import (
    ActorType,
    AuditActor,
    AuditEvent,
    AuditResource,
    AuditResourceType,
)

__all__ = [
    "ActorType",
    "AuditActor",
    "AuditEvent",
    "AuditLogSink",
    "AuditRecorderPort",
    "AuditResource",
    "AuditResourceType",
]
