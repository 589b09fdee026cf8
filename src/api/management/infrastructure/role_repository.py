"""SQLAlchemy implementation of IRoleRepository.

Covers the roles table and the roles_permissions join table.
"""

from __future__ import annotations

from sqlalchemy import and_, delete, exists, select, update
from sqlalchemy.orm import joinedload

from management.domain.aggregates import Role
from management.infrastructure.base import SqlRepository, workspace_from_model
from management.infrastructure.models import (
    PermissionModel,
    RoleModel,
    RolePermissionModel,
)
from management.ports.repositories import IRoleRepository


class RoleRepository(SqlRepository, IRoleRepository):
    """Repository for roles and their permission links."""

    async def get_by_id(self, role_id: str) -> Role | None:
        stmt = (
            select(RoleModel)
            .options(joinedload(RoleModel.workspace))
            .where(RoleModel.id == role_id)
        )
        result = await self._execute(stmt, "role.get_by_id")
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.resource_not_found("role", role_id)
            return None

        self._probe.resource_retrieved("role", role_id)
        return Role(
            id=model.id,
            workspace=workspace_from_model(model.workspace),
            name=model.name,
            description=model.description,
        )

    async def update(self, role_id: str, name: str, description: str | None) -> None:
        """Overwrite name and description.

        Raises:
            PersistenceError: If the statement fails, including when the new
                name collides with another role in the same workspace
        """
        stmt = (
            update(RoleModel)
            .where(RoleModel.id == role_id)
            .values(name=name, description=description)
        )
        await self._execute(stmt, "role.update")
        self._probe.resource_updated("role", role_id)

    async def belongs_to_workspace(
        self,
        workspace_id: str,
        role_id: str,
        permission_id: str,
    ) -> bool:
        stmt = select(
            exists().where(
                and_(RoleModel.id == role_id, RoleModel.workspace_id == workspace_id)
            ),
            exists().where(
                and_(
                    PermissionModel.id == permission_id,
                    PermissionModel.workspace_id == workspace_id,
                )
            ),
        )
        result = await self._execute(stmt, "role.belongs_to_workspace")
        role_found, permission_found = result.one()
        return bool(role_found and permission_found)

    async def disconnect_permission(
        self,
        workspace_id: str,
        role_id: str,
        permission_id: str,
    ) -> int:
        """Delete the link between a role and a permission in one workspace.

        The delete is filtered by all three identifiers, so a link owned by
        another workspace is never touched.

        Returns:
            Number of deleted links (0 or 1)
        """
        stmt = delete(RolePermissionModel).where(
            and_(
                RolePermissionModel.workspace_id == workspace_id,
                RolePermissionModel.role_id == role_id,
                RolePermissionModel.permission_id == permission_id,
            )
        )
        result = await self._execute(stmt, "role.disconnect_permission")
        removed = result.rowcount or 0
        self._probe.permission_disconnected(
            role_id=role_id,
            permission_id=permission_id,
            workspace_id=workspace_id,
            removed=removed,
        )
        return removed
