"""Webhook procedures."""

from __future__ import annotations

from management.application.schemas import ToggleWebhookInput, ToggleWebhookResult
from management.domain.aggregates import Webhook
from management.ports.repositories import IWebhookRepository
from shared_kernel.audit import AuditEvent, AuditResource, AuditResourceType
from shared_kernel.procedures import MutationProcedure, ProcedureContext


def toggle_webhook_procedure(
    webhooks: IWebhookRepository,
) -> MutationProcedure[ToggleWebhookInput, Webhook, ToggleWebhookResult]:
    """Build ``webhook.toggle``. Returns the flag that was stored."""

    async def lookup(ctx: ProcedureContext, data: ToggleWebhookInput) -> Webhook | None:
        return await webhooks.get_by_id(data.webhook_id)

    async def mutate(
        ctx: ProcedureContext, data: ToggleWebhookInput, webhook: Webhook
    ) -> ToggleWebhookResult:
        await webhooks.set_enabled(webhook.id, data.enabled)
        return ToggleWebhookResult(enabled=data.enabled)

    def audit(
        ctx: ProcedureContext, data: ToggleWebhookInput, webhook: Webhook
    ) -> AuditEvent:
        verb = "Enabled" if data.enabled else "Disabled"
        return AuditEvent.by_user(
            workspace_id=webhook.workspace.id,
            user_id=ctx.auth.user.id,
            event="webhook.update",
            description=f"{verb} {webhook.id}",
            resources=(AuditResource(type=AuditResourceType.WEBHOOK, id=webhook.id),),
            context=ctx.auth.audit,
        )

    return MutationProcedure(
        name="webhook.toggle",
        input_model=ToggleWebhookInput,
        lookup=lookup,
        mutate=mutate,
        audit=audit,
        not_found_message="We are unable to find the correct webhook.",
        internal_message="We are unable to update the webhook.",
    )
