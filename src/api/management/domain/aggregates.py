"""Tenant-owned resources managed through the dashboard.

Each resource carries its owning workspace so that ownership can be
checked against the caller's tenant without a second lookup.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Workspace:
    """Resource-owning container belonging to exactly one tenant."""

    id: str
    tenant_id: str
    name: str


@dataclass(frozen=True)
class Api:
    """An API whose keys may be restricted to an IP whitelist.

    ``ip_whitelist`` is a comma-joined list of IP addresses, or None when
    requests are accepted from any address.
    """

    id: str
    workspace: Workspace
    name: str
    key_auth_id: str | None = None
    ip_whitelist: str | None = None

    @property
    def tenant_id(self) -> str:
        return self.workspace.tenant_id


@dataclass(frozen=True)
class Key:
    """A credential issued for an API."""

    id: str
    workspace: Workspace
    name: str | None = None
    key_auth_id: str | None = None

    @property
    def tenant_id(self) -> str:
        return self.workspace.tenant_id


@dataclass(frozen=True)
class Role:
    """A named bundle of permissions within a workspace."""

    id: str
    workspace: Workspace
    name: str
    description: str | None = None

    @property
    def tenant_id(self) -> str:
        return self.workspace.tenant_id


@dataclass(frozen=True)
class Webhook:
    """An integration endpoint that can be switched on and off."""

    id: str
    workspace: Workspace
    destination: str
    enabled: bool

    @property
    def tenant_id(self) -> str:
        return self.workspace.tenant_id
