"""Application layer for the management bounded context."""

from management.application.breadcrumbs import BreadcrumbResolver, Crumb
from management.application.procedures import ManagementProcedures

__all__ = ["BreadcrumbResolver", "Crumb", "ManagementProcedures"]
