"""Application services for the identity bounded context."""

from identity.application.services.authentication_service import (
    AuthenticationService,
)

__all__ = ["AuthenticationService"]
