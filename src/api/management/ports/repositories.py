"""Repository protocols (ports) for the management bounded context.

Lookups return the resource together with its owning workspace so that
procedures can compare the workspace's tenant with the caller's tenant.
Implementations raise ``PersistenceError`` when the data layer fails.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from management.domain.aggregates import Api, Key, Role, Webhook, Workspace


@runtime_checkable
class IWorkspaceRepository(Protocol):
    """Repository for workspace lookups."""

    async def get_by_tenant(self, tenant_id: str) -> Workspace | None:
        """Retrieve the workspace owned by a tenant.

        Args:
            tenant_id: Organisation or personal tenant identifier

        Returns:
            The Workspace, or None if the tenant has no workspace
        """
        ...


@runtime_checkable
class IApiRepository(Protocol):
    """Repository for API persistence."""

    async def get_by_id(self, api_id: str) -> Api | None:
        """Retrieve an API and its workspace by ID."""
        ...

    async def update_ip_whitelist(self, api_id: str, ip_whitelist: str | None) -> None:
        """Replace the IP whitelist of an API.

        Args:
            api_id: The API to update
            ip_whitelist: Comma-joined addresses, or None to clear the whitelist
        """
        ...


@runtime_checkable
class IKeyRepository(Protocol):
    """Repository for key persistence."""

    async def get_by_id(self, key_id: str) -> Key | None:
        """Retrieve a key and its workspace by ID."""
        ...

    async def update_name(self, key_id: str, name: str | None) -> None:
        """Rename a key; None clears the name."""
        ...


@runtime_checkable
class IRoleRepository(Protocol):
    """Repository for roles and their permission links."""

    async def get_by_id(self, role_id: str) -> Role | None:
        """Retrieve a role and its workspace by ID."""
        ...

    async def update(self, role_id: str, name: str, description: str | None) -> None:
        """Overwrite the name and description of a role."""
        ...

    async def belongs_to_workspace(
        self,
        workspace_id: str,
        role_id: str,
        permission_id: str,
    ) -> bool:
        """Whether both the role and the permission belong to ``workspace_id``."""
        ...

    async def disconnect_permission(
        self,
        workspace_id: str,
        role_id: str,
        permission_id: str,
    ) -> int:
        """Remove the link between a role and a permission.

        Only links belonging to ``workspace_id`` are removed.

        Returns:
            Number of links removed (0 when no such link exists)
        """
        ...


@runtime_checkable
class IWebhookRepository(Protocol):
    """Repository for webhook persistence."""

    async def get_by_id(self, webhook_id: str) -> Webhook | None:
        """Retrieve a webhook and its workspace by ID."""
        ...

    async def set_enabled(self, webhook_id: str, enabled: bool) -> None:
        """Switch a webhook on or off."""
        ...
