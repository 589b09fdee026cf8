"""FastAPI dependency injection for the authentication context.

``get_auth_context`` is the only way route handlers obtain the caller.
Any authentication failure ends the request with 401 before a procedure
runs.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from identity.application.observability import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from identity.application.services import AuthenticationService
from identity.infrastructure.session_repository import SessionRepository
from identity.ports.exceptions import AuthenticationError
from infrastructure.database.dependencies import get_read_session
from infrastructure.settings import AuthSettings, get_auth_settings
from shared_kernel.auth.context import AuthContext, RequestMetadata

bearer_scheme = HTTPBearer(auto_error=False)


def get_authentication_probe() -> AuthenticationProbe:
    """Get AuthenticationProbe instance.

    Returns:
        DefaultAuthenticationProbe instance for observability
    """
    return DefaultAuthenticationProbe()


def get_authentication_service(
    session: Annotated[AsyncSession, Depends(get_read_session)],
    probe: Annotated[AuthenticationProbe, Depends(get_authentication_probe)],
) -> AuthenticationService:
    """Get AuthenticationService backed by the read session."""
    return AuthenticationService(sessions=SessionRepository(session), probe=probe)


def request_metadata(request: Request) -> RequestMetadata:
    """Extract client location and user agent for audit events.

    The location is the first X-Forwarded-For hop when present, otherwise
    the peer address.
    """
    forwarded = request.headers.get("x-forwarded-for", "")
    location = forwarded.split(",")[0].strip()
    if not location and request.client is not None:
        location = request.client.host
    return RequestMetadata(
        location=location,
        user_agent=request.headers.get("user-agent", ""),
    )


async def get_auth_context(
    request: Request,
    service: Annotated[AuthenticationService, Depends(get_authentication_service)],
    settings: Annotated[AuthSettings, Depends(get_auth_settings)],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ] = None,
) -> AuthContext:
    """Resolve the authenticated caller for the current request.

    The session token is read from ``Authorization: Bearer`` or, failing
    that, from the session cookie.

    Raises:
        HTTPException 401: If the caller cannot be authenticated
    """
    token = (
        credentials.credentials
        if credentials is not None
        else request.cookies.get(settings.session_cookie)
    )

    try:
        return await service.resolve(
            token=token,
            requested_tenant=request.headers.get(settings.tenant_header),
            metadata=request_metadata(request),
        )
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
