"""Best-effort audit event recorder.

Mutation procedures hand every audit event to ``AuditRecorder.record``
after their write has been committed. The recorder awaits the sink, so the
event is delivered before the procedure returns, but a sink failure never
fails the already-applied mutation: it is logged and the event is dropped.
"""

from __future__ import annotations

from audit.application.observability import AuditProbe, DefaultAuditProbe
from shared_kernel.audit.ports import AuditLogSink
from shared_kernel.audit.value_objects import AuditEvent


class AuditRecorder:
    """Delivers audit events to a sink, logging and dropping on failure."""

    def __init__(self, sink: AuditLogSink, probe: AuditProbe | None = None):
        """Initialize the recorder.

        Args:
            sink: Destination for audit events
            probe: Optional domain probe for observability
        """
        self._sink = sink
        self._probe = probe or DefaultAuditProbe()

    async def record(self, event: AuditEvent) -> None:
        """Deliver one event to the sink. Never raises."""
        try:
            await self._sink.ingest([event])
        except Exception as e:
            self._probe.audit_event_dropped(
                audit_event=event.event,
                workspace_id=event.workspace_id,
                error=repr(e),
            )
            return

        self._probe.audit_event_recorded(
            audit_event=event.event,
            workspace_id=event.workspace_id,
        )
