"""Role and permission procedures."""

from __future__ import annotations

from management.application.schemas import (
    DisconnectPermissionFromRoleInput,
    UpdateRoleInput,
)
from management.domain.aggregates import Role, Workspace
from management.ports.repositories import IRoleRepository, IWorkspaceRepository
from shared_kernel.audit import AuditEvent, AuditResource, AuditResourceType
from shared_kernel.procedures import MutationProcedure, ProcedureContext


def disconnect_permission_from_role_procedure(
    workspaces: IWorkspaceRepository,
    roles: IRoleRepository,
) -> MutationProcedure[DisconnectPermissionFromRoleInput, Workspace, None]:
    """Build ``rbac.disconnectPermissionFromRole``.

    The target is the caller's own workspace, and both the role and the
    permission must belong to it. The delete is scoped to that workspace, so
    links in other workspaces are never touched. Removing a link that does
    not exist between two owned resources still succeeds and is audited.
    """

    async def lookup(
        ctx: ProcedureContext, data: DisconnectPermissionFromRoleInput
    ) -> Workspace | None:
        workspace = await workspaces.get_by_tenant(ctx.auth.tenant_id)
        if workspace is None:
            return None
        if not await roles.belongs_to_workspace(
            workspace_id=workspace.id,
            role_id=data.role_id,
            permission_id=data.permission_id,
        ):
            return None
        return workspace

    async def mutate(
        ctx: ProcedureContext,
        data: DisconnectPermissionFromRoleInput,
        workspace: Workspace,
    ) -> None:
        await roles.disconnect_permission(
            workspace_id=workspace.id,
            role_id=data.role_id,
            permission_id=data.permission_id,
        )

    def audit(
        ctx: ProcedureContext,
        data: DisconnectPermissionFromRoleInput,
        workspace: Workspace,
    ) -> AuditEvent:
        return AuditEvent.by_user(
            workspace_id=workspace.id,
            user_id=ctx.auth.user.id,
            event="authorization.disconnect_role_and_permissions",
            description=(
                f"Disconnect role {data.role_id} from permission {data.permission_id}"
            ),
            resources=(
                AuditResource(type=AuditResourceType.ROLE, id=data.role_id),
                AuditResource(type=AuditResourceType.PERMISSION, id=data.permission_id),
            ),
            context=ctx.auth.audit,
        )

    return MutationProcedure(
        name="rbac.disconnectPermissionFromRole",
        input_model=DisconnectPermissionFromRoleInput,
        lookup=lookup,
        mutate=mutate,
        audit=audit,
        not_found_message="We are unable to find the correct workspace.",
        internal_message="We are unable to disconnect the permission from the role.",
    )


def update_role_procedure(
    roles: IRoleRepository,
) -> MutationProcedure[UpdateRoleInput, Role, None]:
    """Build ``rbac.updateRole``."""

    async def lookup(ctx: ProcedureContext, data: UpdateRoleInput) -> Role | None:
        return await roles.get_by_id(data.id)

    async def mutate(ctx: ProcedureContext, data: UpdateRoleInput, role: Role) -> None:
        await roles.update(role.id, name=data.name, description=data.description)

    def audit(ctx: ProcedureContext, data: UpdateRoleInput, role: Role) -> AuditEvent:
        return AuditEvent.by_user(
            workspace_id=role.workspace.id,
            user_id=ctx.auth.user.id,
            event="role.update",
            description=f"Updated role {role.id}",
            resources=(AuditResource(type=AuditResourceType.ROLE, id=role.id),),
            context=ctx.auth.audit,
        )

    return MutationProcedure(
        name="rbac.updateRole",
        input_model=UpdateRoleInput,
        lookup=lookup,
        mutate=mutate,
        audit=audit,
        not_found_message="We are unable to find the correct role.",
        internal_message="We are unable to update the role.",
    )
