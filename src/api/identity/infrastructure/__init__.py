"""SQLAlchemy adapters for the identity bounded context."""

from identity.infrastructure.session_repository import SessionRepository

__all__ = ["SessionRepository"]
