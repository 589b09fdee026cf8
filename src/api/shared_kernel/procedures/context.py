"""Per-invocation context handed to every mutation procedure."""

from __future__ import annotations

from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession

from shared_kernel.audit.ports import AuditRecorderPort
from shared_kernel.auth.context import AuthContext
from shared_kernel.procedures.observability import (
    DefaultProcedureProbe,
    ProcedureProbe,
)


@dataclass(frozen=True)
class ProcedureContext:
    """Everything a procedure step may touch during one request.

    Attributes:
        session: Write session; the procedure template owns commit/rollback
        auth: The authenticated caller
        audit: Recorder receiving the audit event after a successful write
        probe: Domain probe for procedure outcomes
    """

    session: AsyncSession
    auth: AuthContext
    audit: AuditRecorderPort
    probe: ProcedureProbe = field(default_factory=DefaultProcedureProbe)
