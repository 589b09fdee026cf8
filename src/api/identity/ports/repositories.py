"""Repository protocols (ports) for the identity bounded context."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class ISessionRepository(Protocol):
    """Read access to sessions and memberships for authentication."""

    async def get_active_user_id(self, token: str, now: datetime) -> str | None:
        """Resolve a session token to its user.

        Args:
            token: The session token presented by the client
            now: Reference time; sessions expiring at or before it are ignored

        Returns:
            The user ID, or None if the session is unknown or expired
        """
        ...

    async def is_member_of_tenant(self, user_id: str, tenant_id: str) -> bool:
        """Check whether the user belongs to a workspace of the tenant."""
        ...
