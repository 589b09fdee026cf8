"""Audit event value objects.

Audit events are immutable records of a successful mutation. They are
produced by the procedure layer and consumed by the audit log sink, so the
contract lives in the shared kernel.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from shared_kernel.auth.context import RequestMetadata


class ActorType(StrEnum):
    """Kinds of principals that can perform audited actions."""

    USER = "user"


class AuditResourceType(StrEnum):
    """Resource types referenced by audit events."""

    API = "api"
    KEY = "key"
    ROLE = "role"
    PERMISSION = "permission"
    WEBHOOK = "webhook"


@dataclass(frozen=True)
class AuditActor:
    """The principal that performed an action."""

    type: ActorType
    id: str


@dataclass(frozen=True)
class AuditResource:
    """A resource affected by an action."""

    type: AuditResourceType
    id: str


@dataclass(frozen=True)
class AuditEvent:
    """Immutable record of one successful mutation.

    Attributes:
        workspace_id: Workspace owning the affected resources
        actor: Who performed the mutation
        event: Fixed event category, e.g. "api.update"
        description: Human-readable summary with old/new values or ids
        resources: Affected resources, in a stable order
        context: Client location and user agent
        occurred_at: When the mutation was applied
    """

    workspace_id: str
    actor: AuditActor
    event: str
    description: str
    resources: tuple[AuditResource, ...]
    context: RequestMetadata
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def by_user(
        cls,
        *,
        workspace_id: str,
        user_id: str,
        event: str,
        description: str,
        resources: tuple[AuditResource, ...],
        context: RequestMetadata,
    ) -> AuditEvent:
        """Build an event performed by a dashboard user."""
        return cls(
            workspace_id=workspace_id,
            actor=AuditActor(type=ActorType.USER, id=user_id),
            event=event,
            description=description,
            resources=resources,
            context=context,
        )

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the audit sink wire format."""
        return {
            "workspaceId": self.workspace_id,
            "actor": {"type": self.actor.type.value, "id": self.actor.id},
            "event": self.event,
            "description": self.description,
            "resources": [
                {"type": resource.type.value, "id": resource.id}
                for resource in self.resources
            ],
            "context": {
                "location": self.context.location,
                "userAgent": self.context.user_agent,
            },
            "time": int(self.occurred_at.timestamp() * 1000),
        }
