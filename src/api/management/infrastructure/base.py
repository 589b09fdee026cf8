"""Shared plumbing for the management SQLAlchemy repositories."""

from __future__ import annotations

from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from infrastructure.tenancy.models import WorkspaceModel
from management.domain.aggregates import Workspace
from management.infrastructure.observability import (
    DefaultManagementRepositoryProbe,
    ManagementRepositoryProbe,
)
from shared_kernel.persistence import PersistenceError


def workspace_from_model(model: WorkspaceModel) -> Workspace:
    return Workspace(id=model.id, tenant_id=model.tenant_id, name=model.name)


class SqlRepository:
    """Base class holding the session and probe for a repository.

    Statements run through ``_execute`` so that driver and ORM failures
    surface as ``PersistenceError``. Transactions are left to the caller.
    """

    def __init__(
        self,
        session: AsyncSession,
        probe: ManagementRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultManagementRepositoryProbe()

    async def _execute(self, statement: Executable, operation: str) -> Result:
        try:
            return await self._session.execute(statement)
        except SQLAlchemyError as e:
            self._probe.statement_failed(operation, str(e))
            raise PersistenceError(f"{operation} failed", operation=operation) from e
