"""Generic validate/authorize/mutate/audit procedure template.

A ``MutationProcedure`` is assembled from four plain functions (lookup,
mutate, audit builder and an optional authorize predicate) plus an input
schema. Invoking it runs the steps in order:

1. Validate the payload against ``input_model``.
2. Look up the target and check that the caller's tenant owns it.
3. Apply exactly one write and commit it.
4. Record one audit event, awaited before returning.

Example:
    update_key_name = MutationProcedure(
        name="key.updateName",
        input_model=UpdateKeyNameInput,
        lookup=_lookup_key,
        mutate=_rename_key,
        audit=_key_renamed_event,
        not_found_message="We are unable to find the correct key.",
        internal_message="We are unable to update name on this key.",
    )
    await update_key_name(ctx, {"keyId": "key_123", "name": "ci"})
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError

from shared_kernel.audit.value_objects import AuditEvent
from shared_kernel.persistence import PersistenceError
from shared_kernel.procedures.context import ProcedureContext
from shared_kernel.procedures.errors import (
    SUPPORT_EMAIL,
    InternalProcedureError,
    ProcedureValidationError,
    ResourceNotFoundError,
)
from shared_kernel.procedures.guards import TenantOwned, is_owned_by

InputT = TypeVar("InputT", bound=BaseModel)
TargetT = TypeVar("TargetT", bound=TenantOwned)
ResultT = TypeVar("ResultT")


def owned_by_caller(ctx: ProcedureContext, target: TenantOwned) -> bool:
    """Default authorization: the caller's tenant owns the target."""
    return is_owned_by(target, ctx.auth.tenant_id)


def with_support_hint(message: str) -> str:
    """Append the support contact to a user-facing message."""
    return f"{message} Please contact support using {SUPPORT_EMAIL}."


@dataclass(frozen=True)
class MutationProcedure(Generic[InputT, TargetT, ResultT]):
    """A tenant-scoped mutation with exactly one write and one audit event.

    Attributes:
        name: Procedure name exposed to callers, e.g. "webhook.toggle"
        input_model: Pydantic model validating the payload
        lookup: Loads the target (with its owning workspace) or None
        mutate: Applies the single write; returns the procedure result
        audit: Builds the audit event for a successful write
        not_found_message: Message for absent or foreign resources
        internal_message: Message for data layer failures
        authorize: Predicate deciding whether the caller may touch the target
    """

    name: str
    input_model: type[InputT]
    lookup: Callable[[ProcedureContext, InputT], Awaitable[TargetT | None]]
    mutate: Callable[[ProcedureContext, InputT, TargetT], Awaitable[ResultT]]
    audit: Callable[[ProcedureContext, InputT, TargetT], AuditEvent]
    not_found_message: str
    internal_message: str
    authorize: Callable[[ProcedureContext, TargetT], bool] = owned_by_caller

    def parse(self, payload: InputT | Mapping[str, Any]) -> InputT:
        """Validate a raw payload into the input model.

        Raises:
            ProcedureValidationError: If the payload is malformed
        """
        if isinstance(payload, self.input_model):
            return payload
        try:
            return self.input_model.model_validate(payload)
        except ValidationError as e:
            raise ProcedureValidationError.from_pydantic(e) from e

    async def __call__(
        self,
        ctx: ProcedureContext,
        payload: InputT | Mapping[str, Any],
    ) -> ResultT:
        """Run the procedure for the authenticated caller in ``ctx``.

        Raises:
            ProcedureValidationError: If the payload is malformed
            ResourceNotFoundError: If the target is absent or foreign
            InternalProcedureError: If the data layer fails
        """
        tenant_id = ctx.auth.tenant_id
        user_id = ctx.auth.user.id

        try:
            data = self.parse(payload)
            target = await self._authorized_target(ctx, data)
        except (ProcedureValidationError, ResourceNotFoundError) as e:
            ctx.probe.procedure_rejected(
                procedure=self.name,
                code=e.code,
                reason=e.message,
                tenant_id=tenant_id,
                user_id=user_id,
            )
            raise

        try:
            result = await self.mutate(ctx, data, target)
            await ctx.session.commit()
        except (PersistenceError, SQLAlchemyError) as e:
            await ctx.session.rollback()
            ctx.probe.procedure_failed(
                procedure=self.name,
                error=str(e),
                tenant_id=tenant_id,
                user_id=user_id,
            )
            raise InternalProcedureError(
                with_support_hint(self.internal_message)
            ) from e

        await ctx.audit.record(self.audit(ctx, data, target))

        ctx.probe.procedure_succeeded(
            procedure=self.name,
            tenant_id=tenant_id,
            user_id=user_id,
        )
        return result

    async def _authorized_target(self, ctx: ProcedureContext, data: InputT) -> TargetT:
        """Load the target and enforce tenant ownership."""
        try:
            target = await self.lookup(ctx, data)
        except PersistenceError as e:
            ctx.probe.procedure_failed(
                procedure=self.name,
                error=str(e),
                tenant_id=ctx.auth.tenant_id,
                user_id=ctx.auth.user.id,
            )
            raise InternalProcedureError(
                with_support_hint(self.internal_message)
            ) from e

        if target is None or not self.authorize(ctx, target):
            raise ResourceNotFoundError(with_support_hint(self.not_found_message))
        return target
