"""Application layer for the identity bounded context."""

from identity.application.services import AuthenticationService

__all__ = ["AuthenticationService"]
