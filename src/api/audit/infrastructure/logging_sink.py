"""Audit log sink that writes events to the application log.

Used when no ingestion endpoint is configured, typically in local
development.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from shared_kernel.audit.value_objects import AuditEvent


class LoggingAuditLogSink:
    """AuditLogSink emitting one structlog event per audit event."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger or structlog.get_logger("audit")

    async def ingest(self, events: Sequence[AuditEvent]) -> None:
        for event in events:
            self._logger.info("audit_event", payload=event.to_payload())

    async def close(self) -> None:
        return None
