"""Tenant ownership guard.

Load-by-id, compare the owner tenant to the caller's tenant, and treat a
mismatch exactly like a missing resource.
"""

from __future__ import annotations

from typing import Protocol


class TenantOwned(Protocol):
    """Anything whose owning tenant is known."""

    @property
    def tenant_id(self) -> str: ...


def is_owned_by(resource: TenantOwned | None, tenant_id: str) -> bool:
    """Return True if the resource exists and belongs to the tenant."""
    return resource is not None and resource.tenant_id == tenant_id
