"""Integration tests for management procedures against real repositories.

Each test runs one procedure through the full template (validation,
ownership check, write, commit, audit) and inspects committed rows with
an independent session.
"""

from __future__ import annotations

import pytest
from sqlalchemy import func, select

from management.infrastructure.models import (
    ApiModel,
    KeyModel,
    RoleModel,
    RolePermissionModel,
    WebhookModel,
)
from shared_kernel.audit.value_objects import AuditResourceType
from shared_kernel.procedures import (
    InternalProcedureError,
    ProcedureValidationError,
    ResourceNotFoundError,
)

pytestmark = pytest.mark.integration


async def _scalar(session, stmt):
    return (await session.execute(stmt)).scalar_one()


class TestUpdateIpWhitelist:
    async def test_stores_normalized_whitelist(
        self, procedures, ctx, audit_sink, verify_session
    ):
        await procedures.update_ip_whitelist(
            ctx,
            {"apiId": "api_a", "workspaceId": "ws_a", "ipWhitelist": "10.0.0.1\n ::1"},
        )

        stored = await _scalar(
            verify_session, select(ApiModel.ip_whitelist).where(ApiModel.id == "api_a")
        )
        assert stored == "10.0.0.1,::1"

        (event,) = audit_sink.events
        assert event.workspace_id == "ws_a"
        assert event.event == "api.update"
        assert event.description == "Changed api_a IP whitelist from null to 10.0.0.1,::1"

    async def test_empty_string_clears_whitelist(self, procedures, ctx, verify_session):
        await procedures.update_ip_whitelist(
            ctx, {"apiId": "api_a", "workspaceId": "ws_a", "ipWhitelist": "10.1.1.1"}
        )
        await procedures.update_ip_whitelist(
            ctx, {"apiId": "api_a", "workspaceId": "ws_a", "ipWhitelist": ""}
        )

        stored = await _scalar(
            verify_session, select(ApiModel.ip_whitelist).where(ApiModel.id == "api_a")
        )
        assert stored is None

    async def test_foreign_api_is_not_found_and_untouched(
        self, procedures, ctx, audit_sink, verify_session
    ):
        with pytest.raises(ResourceNotFoundError):
            await procedures.update_ip_whitelist(
                ctx, {"apiId": "api_b", "workspaceId": "ws_b", "ipWhitelist": ""}
            )

        stored = await _scalar(
            verify_session, select(ApiModel.ip_whitelist).where(ApiModel.id == "api_b")
        )
        assert stored == "10.0.0.1"
        assert audit_sink.events == []

    async def test_workspace_mismatch_is_not_found(self, procedures, ctx):
        with pytest.raises(ResourceNotFoundError):
            await procedures.update_ip_whitelist(
                ctx, {"apiId": "api_a", "workspaceId": "ws_b", "ipWhitelist": ""}
            )

    async def test_invalid_address_is_rejected_before_lookup(
        self, procedures, ctx, verify_session
    ):
        with pytest.raises(ProcedureValidationError) as exc_info:
            await procedures.update_ip_whitelist(
                ctx,
                {"apiId": "api_a", "workspaceId": "ws_a", "ipWhitelist": "1.1.1.1,nope"},
            )

        assert "nope" in exc_info.value.message
        stored = await _scalar(
            verify_session, select(ApiModel.ip_whitelist).where(ApiModel.id == "api_a")
        )
        assert stored is None


class TestUpdateKeyName:
    async def test_renames_key(self, procedures, ctx, audit_sink, verify_session):
        result = await procedures.update_key_name(
            ctx, {"keyId": "key_a", "name": "  deploy  "}
        )

        assert result is True
        stored = await _scalar(
            verify_session, select(KeyModel.name).where(KeyModel.id == "key_a")
        )
        assert stored == "deploy"
        assert audit_sink.events[0].description == "Changed name of key_a to deploy"

    async def test_null_clears_name(self, procedures, ctx, audit_sink, verify_session):
        await procedures.update_key_name(ctx, {"keyId": "key_a", "name": None})

        stored = await _scalar(
            verify_session, select(KeyModel.name).where(KeyModel.id == "key_a")
        )
        assert stored is None
        assert audit_sink.events[0].description == "Changed name of key_a to null"

    async def test_foreign_key_is_not_found(self, procedures, ctx, verify_session):
        with pytest.raises(ResourceNotFoundError):
            await procedures.update_key_name(ctx, {"keyId": "key_b", "name": "stolen"})

        stored = await _scalar(
            verify_session, select(KeyModel.name).where(KeyModel.id == "key_b")
        )
        assert stored == "prod"


class TestDisconnectPermissionFromRole:
    async def test_removes_only_own_workspace_link(
        self, procedures, ctx, audit_sink, verify_session
    ):
        await procedures.disconnect_permission_from_role(
            ctx, {"roleId": "role_a", "permissionId": "perm_a"}
        )

        remaining = (
            await verify_session.execute(
                select(RolePermissionModel.role_id, RolePermissionModel.permission_id)
            )
        ).all()
        assert [tuple(row) for row in remaining] == [("role_b", "perm_b")]

        (event,) = audit_sink.events
        assert event.event == "authorization.disconnect_role_and_permissions"
        assert [r.type for r in event.resources] == [
            AuditResourceType.ROLE,
            AuditResourceType.PERMISSION,
        ]

    async def test_cannot_remove_other_workspace_link(
        self, procedures, ctx, audit_sink, verify_session
    ):
        """Naming another tenant's role and permission is not found."""
        with pytest.raises(ResourceNotFoundError):
            await procedures.disconnect_permission_from_role(
                ctx, {"roleId": "role_b", "permissionId": "perm_b"}
            )

        count = await _scalar(
            verify_session,
            select(func.count()).select_from(RolePermissionModel),
        )
        assert count == 2
        assert audit_sink.events == []

    async def test_unknown_ids_are_not_found(self, procedures, ctx, audit_sink):
        with pytest.raises(ResourceNotFoundError):
            await procedures.disconnect_permission_from_role(
                ctx, {"roleId": "role_nope", "permissionId": "perm_nope"}
            )

        assert audit_sink.events == []

    async def test_own_role_with_foreign_permission_is_not_found(
        self, procedures, ctx, audit_sink
    ):
        with pytest.raises(ResourceNotFoundError):
            await procedures.disconnect_permission_from_role(
                ctx, {"roleId": "role_a", "permissionId": "perm_b"}
            )

        assert audit_sink.events == []

    async def test_repeating_the_disconnect_succeeds(self, procedures, ctx, audit_sink):
        payload = {"roleId": "role_a", "permissionId": "perm_a"}

        await procedures.disconnect_permission_from_role(ctx, payload)
        await procedures.disconnect_permission_from_role(ctx, payload)

        assert len(audit_sink.events) == 2


class TestUpdateRole:
    async def test_updates_name_and_description(
        self, procedures, ctx, audit_sink, verify_session
    ):
        await procedures.update_role(
            ctx, {"id": "role_a", "name": "api.admin", "description": "Full access"}
        )

        row = (
            await verify_session.execute(
                select(RoleModel.name, RoleModel.description).where(
                    RoleModel.id == "role_a"
                )
            )
        ).one()
        assert tuple(row) == ("api.admin", "Full access")
        assert audit_sink.events[0].description == "Updated role role_a"

    async def test_name_collision_is_internal_error(
        self, procedures, ctx, audit_sink, verify_session
    ):
        with pytest.raises(InternalProcedureError):
            await procedures.update_role(
                ctx, {"id": "role_a_reader", "name": "admin", "description": None}
            )

        stored = await _scalar(
            verify_session, select(RoleModel.name).where(RoleModel.id == "role_a_reader")
        )
        assert stored == "reader"
        assert audit_sink.events == []

    async def test_foreign_role_is_not_found(self, procedures, ctx):
        with pytest.raises(ResourceNotFoundError):
            await procedures.update_role(
                ctx, {"id": "role_b", "name": "owned", "description": None}
            )


class TestToggleWebhook:
    async def test_disables_webhook(self, procedures, ctx, audit_sink, verify_session):
        result = await procedures.toggle_webhook(
            ctx, {"webhookId": "wh_a", "enabled": False}
        )

        assert result.enabled is False
        stored = await _scalar(
            verify_session, select(WebhookModel.enabled).where(WebhookModel.id == "wh_a")
        )
        assert stored is False
        assert audit_sink.events[0].description == "Disabled wh_a"

    async def test_toggle_is_idempotent(self, procedures, ctx, audit_sink):
        await procedures.toggle_webhook(ctx, {"webhookId": "wh_a", "enabled": True})
        result = await procedures.toggle_webhook(
            ctx, {"webhookId": "wh_a", "enabled": True}
        )

        assert result.enabled is True
        assert [e.description for e in audit_sink.events] == [
            "Enabled wh_a",
            "Enabled wh_a",
        ]

    async def test_foreign_webhook_is_not_found(self, procedures, ctx, verify_session):
        with pytest.raises(ResourceNotFoundError):
            await procedures.toggle_webhook(ctx, {"webhookId": "wh_b", "enabled": True})

        stored = await _scalar(
            verify_session, select(WebhookModel.enabled).where(WebhookModel.id == "wh_b")
        )
        assert stored is False
