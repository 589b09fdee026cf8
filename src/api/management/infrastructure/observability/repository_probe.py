"""Domain probe for management repository operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to API, key, role and webhook
persistence.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ManagementRepositoryProbe(Protocol):
    """Domain probe for management repository operations."""

    def resource_retrieved(self, resource: str, resource_id: str) -> None:
        """Record that a resource was retrieved."""
        ...

    def resource_not_found(self, resource: str, resource_id: str) -> None:
        """Record that a resource was not found."""
        ...

    def resource_updated(self, resource: str, resource_id: str) -> None:
        """Record that a resource row was updated."""
        ...

    def permission_disconnected(
        self,
        role_id: str,
        permission_id: str,
        workspace_id: str,
        removed: int,
    ) -> None:
        """Record that a role-permission link was removed."""
        ...

    def statement_failed(self, operation: str, error: str) -> None:
        """Record that a database statement failed."""
        ...

    def with_context(self, context: ObservationContext) -> ManagementRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultManagementRepositoryProbe:
    """Default implementation of ManagementRepositoryProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(
        self, context: ObservationContext
    ) -> DefaultManagementRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultManagementRepositoryProbe(logger=self._logger, context=context)

    def resource_retrieved(self, resource: str, resource_id: str) -> None:
        self._logger.debug(
            "management_resource_retrieved",
            resource=resource,
            resource_id=resource_id,
            **self._get_context_kwargs(),
        )

    def resource_not_found(self, resource: str, resource_id: str) -> None:
        self._logger.debug(
            "management_resource_not_found",
            resource=resource,
            resource_id=resource_id,
            **self._get_context_kwargs(),
        )

    def resource_updated(self, resource: str, resource_id: str) -> None:
        self._logger.info(
            "management_resource_updated",
            resource=resource,
            resource_id=resource_id,
            **self._get_context_kwargs(),
        )

    def permission_disconnected(
        self,
        role_id: str,
        permission_id: str,
        workspace_id: str,
        removed: int,
    ) -> None:
        self._logger.info(
            "role_permission_disconnected",
            role_id=role_id,
            permission_id=permission_id,
            workspace_id=workspace_id,
            removed=removed,
            **self._get_context_kwargs(),
        )

    def statement_failed(self, operation: str, error: str) -> None:
        self._logger.error(
            "management_statement_failed",
            operation=operation,
            error=error,
            **self._get_context_kwargs(),
        )
