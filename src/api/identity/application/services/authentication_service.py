"""Resolves request credentials into an authenticated tenant context."""

from __future__ import annotations

from datetime import UTC, datetime

from identity.application.observability import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from identity.ports.exceptions import AuthenticationError
from identity.ports.repositories import ISessionRepository
from shared_kernel.auth.context import AuthContext, AuthenticatedUser, RequestMetadata


class AuthenticationService:
    """Turns a session token and optional tenant selection into an AuthContext.

    Every user has a personal tenant whose id equals the user id. Selecting
    any other tenant requires a membership in one of its workspaces.
    """

    def __init__(
        self,
        sessions: ISessionRepository,
        probe: AuthenticationProbe | None = None,
    ) -> None:
        self._sessions = sessions
        self._probe = probe or DefaultAuthenticationProbe()

    async def resolve(
        self,
        token: str | None,
        requested_tenant: str | None,
        metadata: RequestMetadata,
        now: datetime | None = None,
    ) -> AuthContext:
        """Authenticate a request.

        Args:
            token: Session token from the Authorization header or cookie
            requested_tenant: Tenant named by the tenant header, if any
            metadata: Client location and user agent
            now: Reference time for session expiry (defaults to now, UTC)

        Returns:
            AuthContext for the user acting in the resolved tenant

        Raises:
            AuthenticationError: If the token is missing, unknown or expired,
                or the requested tenant is not available to the user
        """
        if not token:
            self._probe.authentication_failed(reason="missing_credentials")
            raise AuthenticationError("Not authenticated", reason="missing_credentials")

        user_id = await self._sessions.get_active_user_id(
            token, now or datetime.now(UTC)
        )
        if user_id is None:
            self._probe.authentication_failed(reason="invalid_or_expired_session")
            raise AuthenticationError(
                "Invalid or expired session", reason="invalid_or_expired_session"
            )

        tenant_id = user_id
        if requested_tenant and requested_tenant != user_id:
            if not await self._sessions.is_member_of_tenant(user_id, requested_tenant):
                self._probe.tenant_selection_denied(
                    user_id=user_id, tenant_id=requested_tenant
                )
                raise AuthenticationError(
                    "Tenant not available", reason="tenant_not_available"
                )
            tenant_id = requested_tenant

        self._probe.user_authenticated(user_id=user_id, tenant_id=tenant_id)
        return AuthContext(
            tenant_id=tenant_id,
            user=AuthenticatedUser(id=user_id),
            audit=metadata,
        )
