"""SQLAlchemy implementation of IWebhookRepository."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.orm import joinedload

from management.domain.aggregates import Webhook
from management.infrastructure.base import SqlRepository, workspace_from_model
from management.infrastructure.models import WebhookModel
from management.ports.repositories import IWebhookRepository


class WebhookRepository(SqlRepository, IWebhookRepository):
    """Repository for webhooks."""

    async def get_by_id(self, webhook_id: str) -> Webhook | None:
        stmt = (
            select(WebhookModel)
            .options(joinedload(WebhookModel.workspace))
            .where(WebhookModel.id == webhook_id)
        )
        result = await self._execute(stmt, "webhook.get_by_id")
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.resource_not_found("webhook", webhook_id)
            return None

        self._probe.resource_retrieved("webhook", webhook_id)
        return Webhook(
            id=model.id,
            workspace=workspace_from_model(model.workspace),
            destination=model.destination,
            enabled=model.enabled,
        )

    async def set_enabled(self, webhook_id: str, enabled: bool) -> None:
        stmt = (
            update(WebhookModel)
            .where(WebhookModel.id == webhook_id)
            .values(enabled=enabled)
        )
        await self._execute(stmt, "webhook.set_enabled")
        self._probe.resource_updated("webhook", webhook_id)
