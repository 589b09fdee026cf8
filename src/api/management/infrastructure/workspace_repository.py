"""SQLAlchemy implementation of IWorkspaceRepository."""

from __future__ import annotations

from sqlalchemy import select

from infrastructure.tenancy.models import WorkspaceModel
from management.domain.aggregates import Workspace
from management.infrastructure.base import SqlRepository, workspace_from_model
from management.ports.repositories import IWorkspaceRepository


class WorkspaceRepository(SqlRepository, IWorkspaceRepository):
    """Read access to the workspaces table."""

    async def get_by_tenant(self, tenant_id: str) -> Workspace | None:
        stmt = select(WorkspaceModel).where(WorkspaceModel.tenant_id == tenant_id)
        result = await self._execute(stmt, "workspace.get_by_tenant")
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.resource_not_found("workspace", tenant_id)
            return None

        self._probe.resource_retrieved("workspace", model.id)
        return workspace_from_model(model)
