"""Tenancy tables shared by the identity and management contexts."""

from infrastructure.tenancy.models import WorkspaceModel

__all__ = ["WorkspaceModel"]
