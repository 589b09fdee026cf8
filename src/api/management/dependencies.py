"""FastAPI dependency injection for the management context.

Repositories are bound to the request's write session; the procedure
context shares that session so the template can commit or roll back the
single write it applies.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from audit.application import AuditRecorder
from audit.dependencies import get_audit_recorder
from identity.dependencies import get_auth_context
from infrastructure.database.dependencies import get_read_session, get_write_session
from management.application.breadcrumbs import BreadcrumbResolver
from management.application.procedures import ManagementProcedures
from management.infrastructure import (
    ApiRepository,
    KeyRepository,
    RoleRepository,
    WebhookRepository,
    WorkspaceRepository,
)
from management.infrastructure.observability import (
    DefaultManagementRepositoryProbe,
    ManagementRepositoryProbe,
)
from shared_kernel.auth.context import AuthContext
from shared_kernel.observability_context import ObservationContext
from shared_kernel.procedures import (
    DefaultProcedureProbe,
    ProcedureContext,
    ProcedureProbe,
)


def _observation_context(auth: AuthContext) -> ObservationContext:
    return ObservationContext(user_id=auth.user.id, tenant_id=auth.tenant_id)


def get_repository_probe(
    auth: Annotated[AuthContext, Depends(get_auth_context)],
) -> ManagementRepositoryProbe:
    """Get ManagementRepositoryProbe bound to the caller."""
    return DefaultManagementRepositoryProbe().with_context(_observation_context(auth))


def get_procedure_probe(
    auth: Annotated[AuthContext, Depends(get_auth_context)],
) -> ProcedureProbe:
    """Get ProcedureProbe bound to the caller."""
    return DefaultProcedureProbe().with_context(_observation_context(auth))


def get_management_procedures(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    probe: Annotated[ManagementRepositoryProbe, Depends(get_repository_probe)],
) -> ManagementProcedures:
    """Get the management procedures bound to the request's write session."""
    return ManagementProcedures.build(
        workspaces=WorkspaceRepository(session, probe),
        apis=ApiRepository(session, probe),
        keys=KeyRepository(session, probe),
        roles=RoleRepository(session, probe),
        webhooks=WebhookRepository(session, probe),
    )


def get_procedure_context(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    auth: Annotated[AuthContext, Depends(get_auth_context)],
    recorder: Annotated[AuditRecorder, Depends(get_audit_recorder)],
    probe: Annotated[ProcedureProbe, Depends(get_procedure_probe)],
) -> ProcedureContext:
    """Get the per-request procedure context."""
    return ProcedureContext(session=session, auth=auth, audit=recorder, probe=probe)


def get_breadcrumb_resolver(
    session: Annotated[AsyncSession, Depends(get_read_session)],
    auth: Annotated[AuthContext, Depends(get_auth_context)],
    probe: Annotated[ManagementRepositoryProbe, Depends(get_repository_probe)],
) -> BreadcrumbResolver:
    """Get a BreadcrumbResolver scoped to this request and tenant."""
    return BreadcrumbResolver(
        apis=ApiRepository(session, probe), tenant_id=auth.tenant_id
    )
