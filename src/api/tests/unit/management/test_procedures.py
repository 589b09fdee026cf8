"""Unit tests for the five management procedures with mocked repositories."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from management.application.procedures import ManagementProcedures
from management.application.schemas import ToggleWebhookResult
from management.domain.aggregates import Api, Key, Role, Webhook
from management.ports.repositories import (
    IApiRepository,
    IKeyRepository,
    IRoleRepository,
    IWebhookRepository,
    IWorkspaceRepository,
)
from shared_kernel.procedures import ProcedureValidationError, ResourceNotFoundError


def _mock(protocol) -> AsyncMock:
    return AsyncMock(spec=protocol)


@pytest.fixture
def workspaces() -> AsyncMock:
    return _mock(IWorkspaceRepository)


@pytest.fixture
def apis() -> AsyncMock:
    return _mock(IApiRepository)


@pytest.fixture
def keys() -> AsyncMock:
    return _mock(IKeyRepository)


@pytest.fixture
def roles() -> AsyncMock:
    return _mock(IRoleRepository)


@pytest.fixture
def webhooks() -> AsyncMock:
    return _mock(IWebhookRepository)


@pytest.fixture
def procedures(workspaces, apis, keys, roles, webhooks) -> ManagementProcedures:
    return ManagementProcedures.build(
        workspaces=workspaces, apis=apis, keys=keys, roles=roles, webhooks=webhooks
    )


class TestManagementProcedures:
    """Tests for the procedure bundle."""

    def test_exposes_procedures_by_public_name(self, procedures):
        assert set(procedures.by_name()) == {
            "api.updateIpWhitelist",
            "key.updateName",
            "rbac.disconnectPermissionFromRole",
            "rbac.updateRole",
            "webhook.toggle",
        }


class TestUpdateIpWhitelist:
    """Tests for api.updateIpWhitelist."""

    @pytest.mark.asyncio
    async def test_stores_normalised_whitelist(
        self, procedures, apis, workspace, procedure_context, audit_sink
    ):
        apis.get_by_id.return_value = Api(
            id="api_1", workspace=workspace, name="payments", ip_whitelist=None
        )

        result = await procedures.update_ip_whitelist(
            procedure_context,
            {"apiId": "api_1", "workspaceId": "ws_a", "ipWhitelist": "1.1.1.1, 2.2.2.2"},
        )

        assert result is None
        apis.update_ip_whitelist.assert_awaited_once_with("api_1", "1.1.1.1,2.2.2.2")
        (event,) = audit_sink.events
        assert event.event == "api.update"
        assert event.description == (
            "Changed api_1 IP whitelist from null to 1.1.1.1,2.2.2.2"
        )
        assert [r.id for r in event.resources] == ["api_1"]

    @pytest.mark.asyncio
    async def test_empty_string_clears(
        self, procedures, apis, workspace, procedure_context
    ):
        apis.get_by_id.return_value = Api(
            id="api_1", workspace=workspace, name="payments", ip_whitelist="1.1.1.1"
        )

        await procedures.update_ip_whitelist(
            procedure_context, {"apiId": "api_1", "workspaceId": "ws_a", "ipWhitelist": ""}
        )

        apis.update_ip_whitelist.assert_awaited_once_with("api_1", None)

    @pytest.mark.asyncio
    async def test_invalid_address_never_reaches_repository(
        self, procedures, apis, procedure_context
    ):
        with pytest.raises(ProcedureValidationError) as exc_info:
            await procedures.update_ip_whitelist(
                procedure_context,
                {"apiId": "api_1", "workspaceId": "ws_a", "ipWhitelist": "not-an-ip"},
            )

        assert exc_info.value.message == "Invalid IP address: 'not-an-ip'"
        apis.get_by_id.assert_not_awaited()
        apis.update_ip_whitelist.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_mismatched_workspace_is_not_found(
        self, procedures, apis, workspace, procedure_context, audit_sink
    ):
        apis.get_by_id.return_value = Api(id="api_1", workspace=workspace, name="payments")

        with pytest.raises(ResourceNotFoundError):
            await procedures.update_ip_whitelist(
                procedure_context,
                {"apiId": "api_1", "workspaceId": "ws_other", "ipWhitelist": ""},
            )

        apis.update_ip_whitelist.assert_not_awaited()
        assert audit_sink.events == []

    @pytest.mark.asyncio
    async def test_foreign_api_is_not_found(
        self, procedures, apis, foreign_workspace, procedure_context
    ):
        apis.get_by_id.return_value = Api(
            id="api_9", workspace=foreign_workspace, name="theirs"
        )

        with pytest.raises(ResourceNotFoundError) as exc_info:
            await procedures.update_ip_whitelist(
                procedure_context,
                {"apiId": "api_9", "workspaceId": "ws_b", "ipWhitelist": ""},
            )

        assert exc_info.value.message.startswith("We are unable to find the correct API.")


class TestUpdateKeyName:
    """Tests for key.updateName."""

    @pytest.mark.asyncio
    async def test_renames_and_returns_true(
        self, procedures, keys, workspace, procedure_context, audit_sink
    ):
        keys.get_by_id.return_value = Key(id="key_1", workspace=workspace, name="old")

        result = await procedures.update_key_name(
            procedure_context, {"keyId": "key_1", "name": " ci "}
        )

        assert result is True
        keys.update_name.assert_awaited_once_with("key_1", "ci")
        (event,) = audit_sink.events
        assert event.event == "key.update"
        assert event.description == "Changed name of key_1 to ci"

    @pytest.mark.asyncio
    async def test_null_clears_name(self, procedures, keys, workspace, procedure_context, audit_sink):
        keys.get_by_id.return_value = Key(id="key_1", workspace=workspace, name="old")

        await procedures.update_key_name(procedure_context, {"keyId": "key_1", "name": None})

        keys.update_name.assert_awaited_once_with("key_1", None)
        assert audit_sink.events[0].description == "Changed name of key_1 to null"

    @pytest.mark.asyncio
    async def test_missing_key_is_not_found(self, procedures, keys, procedure_context):
        keys.get_by_id.return_value = None

        with pytest.raises(ResourceNotFoundError):
            await procedures.update_key_name(
                procedure_context, {"keyId": "key_404", "name": "ci"}
            )

        keys.update_name.assert_not_awaited()


class TestDisconnectPermissionFromRole:
    """Tests for rbac.disconnectPermissionFromRole."""

    @pytest.mark.asyncio
    async def test_deletes_within_callers_workspace(
        self, procedures, workspaces, roles, workspace, procedure_context, audit_sink
    ):
        workspaces.get_by_tenant.return_value = workspace
        roles.belongs_to_workspace.return_value = True
        roles.disconnect_permission.return_value = 1

        await procedures.disconnect_permission_from_role(
            procedure_context, {"roleId": "role_1", "permissionId": "perm_1"}
        )

        workspaces.get_by_tenant.assert_awaited_once_with("tenant_a")
        roles.disconnect_permission.assert_awaited_once_with(
            workspace_id="ws_a", role_id="role_1", permission_id="perm_1"
        )
        (event,) = audit_sink.events
        assert event.event == "authorization.disconnect_role_and_permissions"
        assert event.description == "Disconnect role role_1 from permission perm_1"
        assert [(r.type.value, r.id) for r in event.resources] == [
            ("role", "role_1"),
            ("permission", "perm_1"),
        ]

    @pytest.mark.asyncio
    async def test_absent_link_still_succeeds(
        self, procedures, workspaces, roles, workspace, procedure_context, audit_sink
    ):
        workspaces.get_by_tenant.return_value = workspace
        roles.belongs_to_workspace.return_value = True
        roles.disconnect_permission.return_value = 0

        await procedures.disconnect_permission_from_role(
            procedure_context, {"roleId": "role_1", "permissionId": "perm_1"}
        )

        assert len(audit_sink.events) == 1

    @pytest.mark.asyncio
    async def test_tenant_without_workspace_is_not_found(
        self, procedures, workspaces, roles, procedure_context
    ):
        workspaces.get_by_tenant.return_value = None

        with pytest.raises(ResourceNotFoundError) as exc_info:
            await procedures.disconnect_permission_from_role(
                procedure_context, {"roleId": "role_1", "permissionId": "perm_1"}
            )

        assert "correct workspace" in exc_info.value.message
        roles.disconnect_permission.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_role_or_permission_outside_workspace_is_not_found(
        self, procedures, workspaces, roles, workspace, procedure_context, audit_sink
    ):
        workspaces.get_by_tenant.return_value = workspace
        roles.belongs_to_workspace.return_value = False

        with pytest.raises(ResourceNotFoundError):
            await procedures.disconnect_permission_from_role(
                procedure_context, {"roleId": "role_b", "permissionId": "perm_b"}
            )

        roles.belongs_to_workspace.assert_awaited_once_with(
            workspace_id="ws_a", role_id="role_b", permission_id="perm_b"
        )
        roles.disconnect_permission.assert_not_awaited()
        assert audit_sink.events == []


class TestUpdateRole:
    """Tests for rbac.updateRole."""

    @pytest.mark.asyncio
    async def test_updates_name_and_description(
        self, procedures, roles, workspace, procedure_context, audit_sink
    ):
        roles.get_by_id.return_value = Role(id="role_1", workspace=workspace, name="old")

        await procedures.update_role(
            procedure_context,
            {"id": "role_1", "name": "valid_role-1.0", "description": None},
        )

        roles.update.assert_awaited_once_with(
            "role_1", name="valid_role-1.0", description=None
        )
        (event,) = audit_sink.events
        assert event.event == "role.update"
        assert event.description == "Updated role role_1"

    @pytest.mark.asyncio
    async def test_short_name_is_rejected(self, procedures, roles, procedure_context):
        with pytest.raises(ProcedureValidationError) as exc_info:
            await procedures.update_role(
                procedure_context, {"id": "role_1", "name": "ab", "description": None}
            )

        assert exc_info.value.issues[0].path == ("name",)
        roles.get_by_id.assert_not_awaited()


class TestToggleWebhook:
    """Tests for webhook.toggle."""

    @pytest.mark.asyncio
    async def test_enables_and_returns_flag(
        self, procedures, webhooks, workspace, procedure_context, audit_sink
    ):
        webhooks.get_by_id.return_value = Webhook(
            id="wh_1", workspace=workspace, destination="https://example.com/hook", enabled=False
        )

        result = await procedures.toggle_webhook(
            procedure_context, {"webhookId": "wh_1", "enabled": True}
        )

        assert result == ToggleWebhookResult(enabled=True)
        webhooks.set_enabled.assert_awaited_once_with("wh_1", True)
        assert audit_sink.events[0].description == "Enabled wh_1"

    @pytest.mark.asyncio
    async def test_disable_is_described(
        self, procedures, webhooks, workspace, procedure_context, audit_sink
    ):
        webhooks.get_by_id.return_value = Webhook(
            id="wh_1", workspace=workspace, destination="https://example.com/hook", enabled=True
        )

        await procedures.toggle_webhook(
            procedure_context, {"webhookId": "wh_1", "enabled": False}
        )

        assert audit_sink.events[0].description == "Disabled wh_1"
        assert audit_sink.events[0].event == "webhook.update"
