"""Unit tests for AuditEvent serialization."""

from datetime import UTC, datetime

from shared_kernel.audit import (
    ActorType,
    AuditActor,
    AuditEvent,
    AuditResource,
    AuditResourceType,
)
from shared_kernel.auth.context import RequestMetadata


class TestAuditEventPayload:
    """Tests for AuditEvent.to_payload."""

    def test_matches_sink_contract(self):
        event = AuditEvent(
            workspace_id="ws_a",
            actor=AuditActor(type=ActorType.USER, id="user_alice"),
            event="authorization.disconnect_role_and_permissions",
            description="Disconnect role role_1 from permission perm_1",
            resources=(
                AuditResource(type=AuditResourceType.ROLE, id="role_1"),
                AuditResource(type=AuditResourceType.PERMISSION, id="perm_1"),
            ),
            context=RequestMetadata(location="203.0.113.7", user_agent="pytest"),
            occurred_at=datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC),
        )

        assert event.to_payload() == {
            "workspaceId": "ws_a",
            "actor": {"type": "user", "id": "user_alice"},
            "event": "authorization.disconnect_role_and_permissions",
            "description": "Disconnect role role_1 from permission perm_1",
            "resources": [
                {"type": "role", "id": "role_1"},
                {"type": "permission", "id": "perm_1"},
            ],
            "context": {"location": "203.0.113.7", "userAgent": "pytest"},
            "time": 1767323045000,
        }

    def test_by_user_sets_user_actor(self):
        event = AuditEvent.by_user(
            workspace_id="ws_a",
            user_id="user_alice",
            event="role.update",
            description="Updated role role_1",
            resources=(AuditResource(type=AuditResourceType.ROLE, id="role_1"),),
            context=RequestMetadata(location="", user_agent=""),
        )

        assert event.actor == AuditActor(type=ActorType.USER, id="user_alice")
        assert event.occurred_at.tzinfo is not None
