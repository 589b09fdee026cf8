"""Ports for recording and persisting audit events."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from shared_kernel.audit.value_objects import AuditEvent


@runtime_checkable
class AuditLogSink(Protocol):
    """Durable destination for audit events.

    Implementations persist independently of the transactional store and
    raise on rejected or failed ingestion.
    """

    async def ingest(self, events: Sequence[AuditEvent]) -> None:
        """Persist a batch of audit events."""
        ...

    async def close(self) -> None:
        """Release any held resources (connections, clients)."""
        ...


@runtime_checkable
class AuditRecorderPort(Protocol):
    """What the procedure layer needs from the audit log.

    ``record`` is awaited before a procedure returns and never raises.
    """

    async def record(self, event: AuditEvent) -> None:
        """Record one audit event."""
        ...
