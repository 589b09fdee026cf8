"""Domain probe for mutation procedure outcomes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ProcedureProbe(Protocol):
    """Domain probe for mutation procedure execution."""

    def procedure_succeeded(self, procedure: str, tenant_id: str, user_id: str) -> None:
        """Record that a procedure applied its mutation."""
        ...

    def procedure_rejected(
        self,
        procedure: str,
        code: str,
        reason: str,
        tenant_id: str,
        user_id: str,
    ) -> None:
        """Record that a procedure refused the request (validation, not found)."""
        ...

    def procedure_failed(
        self,
        procedure: str,
        error: str,
        tenant_id: str,
        user_id: str,
    ) -> None:
        """Record that the data layer failed during a procedure."""
        ...

    def with_context(self, context: ObservationContext) -> ProcedureProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultProcedureProbe:
    """Default implementation of ProcedureProbe using structlog."""

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

    def _fields(self, **fields: Any) -> dict[str, Any]:
        """Merge explicit fields over the bound context."""
        return {**self._get_context_kwargs(), **fields}

    def with_context(self, context: ObservationContext) -> DefaultProcedureProbe:
        """Create a new probe with observation context bound."""
        return DefaultProcedureProbe(logger=self._logger, context=context)

    def procedure_succeeded(self, procedure: str, tenant_id: str, user_id: str) -> None:
        """Record that a procedure applied its mutation."""
        self._logger.info(
            "procedure_succeeded",
            **self._fields(procedure=procedure, tenant_id=tenant_id, user_id=user_id),
        )

    def procedure_rejected(
        self,
        procedure: str,
        code: str,
        reason: str,
        tenant_id: str,
        user_id: str,
    ) -> None:
        """Record that a procedure refused the request (validation, not found)."""
        self._logger.warning(
            "procedure_rejected",
            **self._fields(
                procedure=procedure,
                code=code,
                reason=reason,
                tenant_id=tenant_id,
                user_id=user_id,
            ),
        )

    def procedure_failed(
        self,
        procedure: str,
        error: str,
        tenant_id: str,
        user_id: str,
    ) -> None:
        """Record that the data layer failed during a procedure."""
        self._logger.error(
            "procedure_failed",
            **self._fields(
                procedure=procedure,
                error=error,
                tenant_id=tenant_id,
                user_id=user_id,
            ),
        )
