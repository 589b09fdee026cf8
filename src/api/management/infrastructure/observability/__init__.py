"""Observability for management infrastructure."""

from management.infrastructure.observability.repository_probe import (
    DefaultManagementRepositoryProbe,
    ManagementRepositoryProbe,
)

__all__ = ["DefaultManagementRepositoryProbe", "ManagementRepositoryProbe"]
