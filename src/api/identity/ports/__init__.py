"""Ports for the identity bounded context."""

from identity.ports.exceptions import AuthenticationError
from identity.ports.repositories import ISessionRepository

__all__ = ["AuthenticationError", "ISessionRepository"]
