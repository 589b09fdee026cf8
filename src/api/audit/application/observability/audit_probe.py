"""Protocol for audit recording observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class AuditProbe(Protocol):
    """Domain probe for audit event delivery."""

    def audit_event_recorded(self, audit_event: str, workspace_id: str) -> None:
        """Record that an audit event reached the sink."""
        ...

    def audit_event_dropped(
        self, audit_event: str, workspace_id: str, error: str
    ) -> None:
        """Record that the sink failed and the event was dropped."""
        ...

    def with_context(self, context: ObservationContext) -> AuditProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAuditProbe:
    """Default implementation of AuditProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultAuditProbe:
        """Create a new probe with observation context bound."""
        return DefaultAuditProbe(logger=self._logger, context=context)

    def audit_event_recorded(self, audit_event: str, workspace_id: str) -> None:
        """Record that an audit event reached the sink."""
        self._logger.debug(
            "audit_event_recorded",
            audit_event=audit_event,
            workspace_id=workspace_id,
            **self._get_context_kwargs(),
        )

    def audit_event_dropped(
        self, audit_event: str, workspace_id: str, error: str
    ) -> None:
        """Record that the sink failed and the event was dropped."""
        self._logger.error(
            "audit_event_dropped",
            audit_event=audit_event,
            workspace_id=workspace_id,
            error=error,
            **self._get_context_kwargs(),
        )
