"""Database infrastructure - shared connection primitives."""

from infrastructure.database.models import Base, TimestampMixin

__all__ = [
    "Base",
    "TimestampMixin",
]
