"""API procedures."""

from __future__ import annotations

from management.application.schemas import UpdateIpWhitelistInput
from management.domain.aggregates import Api
from management.ports.repositories import IApiRepository
from shared_kernel.audit import AuditEvent, AuditResource, AuditResourceType
from shared_kernel.procedures import MutationProcedure, ProcedureContext


def _display(value: str | None) -> str:
    return "null" if value is None else value


def update_ip_whitelist_procedure(
    apis: IApiRepository,
) -> MutationProcedure[UpdateIpWhitelistInput, Api, None]:
    """Build ``api.updateIpWhitelist``.

    The API must belong to the caller's tenant and to the workspace named
    in the payload; anything else is reported as not found.
    """

    async def lookup(ctx: ProcedureContext, data: UpdateIpWhitelistInput) -> Api | None:
        api = await apis.get_by_id(data.api_id)
        if api is None or api.workspace.id != data.workspace_id:
            return None
        return api

    async def mutate(
        ctx: ProcedureContext, data: UpdateIpWhitelistInput, api: Api
    ) -> None:
        await apis.update_ip_whitelist(api.id, data.ip_whitelist)

    def audit(ctx: ProcedureContext, data: UpdateIpWhitelistInput, api: Api) -> AuditEvent:
        return AuditEvent.by_user(
            workspace_id=api.workspace.id,
            user_id=ctx.auth.user.id,
            event="api.update",
            description=(
                f"Changed {api.id} IP whitelist from "
                f"{_display(api.ip_whitelist)} to {_display(data.ip_whitelist)}"
            ),
            resources=(AuditResource(type=AuditResourceType.API, id=api.id),),
            context=ctx.auth.audit,
        )

    return MutationProcedure(
        name="api.updateIpWhitelist",
        input_model=UpdateIpWhitelistInput,
        lookup=lookup,
        mutate=mutate,
        audit=audit,
        not_found_message="We are unable to find the correct API.",
        internal_message="We are unable to update the API whitelist.",
    )
