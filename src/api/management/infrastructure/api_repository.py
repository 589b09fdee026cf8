"""SQLAlchemy implementation of IApiRepository."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.orm import joinedload

from management.domain.aggregates import Api
from management.infrastructure.base import SqlRepository, workspace_from_model
from management.infrastructure.models import ApiModel
from management.ports.repositories import IApiRepository


class ApiRepository(SqlRepository, IApiRepository):
    """Repository for APIs stored in the apis table."""

    async def get_by_id(self, api_id: str) -> Api | None:
        """Retrieve an API with its owning workspace eagerly loaded.

        Args:
            api_id: The API identifier

        Returns:
            The Api, or None if no API has this ID
        """
        stmt = (
            select(ApiModel)
            .options(joinedload(ApiModel.workspace))
            .where(ApiModel.id == api_id)
        )
        result = await self._execute(stmt, "api.get_by_id")
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.resource_not_found("api", api_id)
            return None

        self._probe.resource_retrieved("api", api_id)
        return self._to_aggregate(model)

    async def update_ip_whitelist(self, api_id: str, ip_whitelist: str | None) -> None:
        stmt = (
            update(ApiModel)
            .where(ApiModel.id == api_id)
            .values(ip_whitelist=ip_whitelist)
        )
        await self._execute(stmt, "api.update_ip_whitelist")
        self._probe.resource_updated("api", api_id)

    def _to_aggregate(self, model: ApiModel) -> Api:
        return Api(
            id=model.id,
            workspace=workspace_from_model(model.workspace),
            name=model.name,
            key_auth_id=model.key_auth_id,
            ip_whitelist=model.ip_whitelist,
        )
