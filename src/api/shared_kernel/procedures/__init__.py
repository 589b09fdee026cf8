"""Tenant-scoped mutation procedures.

Provides the generic validate/authorize/mutate/audit template, its error
taxonomy and the per-invocation context.
"""

from shared_kernel.procedures.context import ProcedureContext
from shared_kernel.procedures.errors import (
    SUPPORT_EMAIL,
    InternalProcedureError,
    ProcedureError,
    ProcedureValidationError,
    ResourceNotFoundError,
    ValidationIssue,
)
from shared_kernel.procedures.guards import TenantOwned, is_owned_by
from shared_kernel.procedures.mutation import (
    MutationProcedure,
    owned_by_caller,
    with_support_hint,
)
from shared_kernel.procedures.observability import (
    DefaultProcedureProbe,
    ProcedureProbe,
)

__all__ = [
    "SUPPORT_EMAIL",
    "DefaultProcedureProbe",
    "InternalProcedureError",
    "MutationProcedure",
    "ProcedureContext",
    "ProcedureError",
    "ProcedureProbe",
    "ProcedureValidationError",
    "ResourceNotFoundError",
    "TenantOwned",
    "ValidationIssue",
    "is_owned_by",
    "owned_by_caller",
    "with_support_hint",
]
