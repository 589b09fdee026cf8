"""Key procedures."""

from __future__ import annotations

from management.application.schemas import UpdateKeyNameInput
from management.domain.aggregates import Key
from management.ports.repositories import IKeyRepository
from shared_kernel.audit import AuditEvent, AuditResource, AuditResourceType
from shared_kernel.procedures import MutationProcedure, ProcedureContext


def update_key_name_procedure(
    keys: IKeyRepository,
) -> MutationProcedure[UpdateKeyNameInput, Key, bool]:
    """Build ``key.updateName``. Returns True once the name is stored."""

    async def lookup(ctx: ProcedureContext, data: UpdateKeyNameInput) -> Key | None:
        return await keys.get_by_id(data.key_id)

    async def mutate(ctx: ProcedureContext, data: UpdateKeyNameInput, key: Key) -> bool:
        await keys.update_name(key.id, data.name)
        return True

    def audit(ctx: ProcedureContext, data: UpdateKeyNameInput, key: Key) -> AuditEvent:
        name = "null" if data.name is None else data.name
        return AuditEvent.by_user(
            workspace_id=key.workspace.id,
            user_id=ctx.auth.user.id,
            event="key.update",
            description=f"Changed name of {key.id} to {name}",
            resources=(AuditResource(type=AuditResourceType.KEY, id=key.id),),
            context=ctx.auth.audit,
        )

    return MutationProcedure(
        name="key.updateName",
        input_model=UpdateKeyNameInput,
        lookup=lookup,
        mutate=mutate,
        audit=audit,
        not_found_message="We are unable to find the correct key.",
        internal_message="We are unable to update name on this key.",
    )
