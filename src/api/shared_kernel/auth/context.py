"""Authentication context shared by every bounded context.

The identity context resolves these values from request credentials; the
procedure layer and audit log only ever read them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestMetadata:
    """Client metadata recorded alongside audit events.

    Attributes:
        location: Client address (first X-Forwarded-For hop or peer address)
        user_agent: The User-Agent header, empty when absent
    """

    location: str
    user_agent: str


@dataclass(frozen=True)
class AuthenticatedUser:
    """The user behind the current request."""

    id: str


@dataclass(frozen=True)
class AuthContext:
    """Represents the authenticated caller scoped to a tenant.

    Attributes:
        tenant_id: The tenant the caller is acting for
        user: The acting user
        audit: Request metadata for audit events
    """

    tenant_id: str
    user: AuthenticatedUser
    audit: RequestMetadata
