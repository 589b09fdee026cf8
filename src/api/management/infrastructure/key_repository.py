"""SQLAlchemy implementation of IKeyRepository."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.orm import joinedload

from management.domain.aggregates import Key
from management.infrastructure.base import SqlRepository, workspace_from_model
from management.infrastructure.models import KeyModel
from management.ports.repositories import IKeyRepository


class KeyRepository(SqlRepository, IKeyRepository):
    """Repository for key metadata stored in the keys table."""

    async def get_by_id(self, key_id: str) -> Key | None:
        stmt = (
            select(KeyModel)
            .options(joinedload(KeyModel.workspace))
            .where(KeyModel.id == key_id)
        )
        result = await self._execute(stmt, "key.get_by_id")
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.resource_not_found("key", key_id)
            return None

        self._probe.resource_retrieved("key", key_id)
        return Key(
            id=model.id,
            workspace=workspace_from_model(model.workspace),
            name=model.name,
            key_auth_id=model.key_auth_id,
        )

    async def update_name(self, key_id: str, name: str | None) -> None:
        stmt = update(KeyModel).where(KeyModel.id == key_id).values(name=name)
        await self._execute(stmt, "key.update_name")
        self._probe.resource_updated("key", key_id)
