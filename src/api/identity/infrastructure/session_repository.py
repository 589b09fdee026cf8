"""SQLAlchemy implementation of ISessionRepository."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from identity.infrastructure.models import MembershipModel, SessionModel
from identity.ports.repositories import ISessionRepository
from infrastructure.tenancy.models import WorkspaceModel


class SessionRepository(ISessionRepository):
    """Looks up sessions and tenant memberships."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
        """
        self._session = session

    async def get_active_user_id(self, token: str, now: datetime) -> str | None:
        stmt = select(SessionModel.user_id).where(
            and_(SessionModel.id == token, SessionModel.expires_at > now)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def is_member_of_tenant(self, user_id: str, tenant_id: str) -> bool:
        stmt = (
            select(MembershipModel.id)
            .join(WorkspaceModel, MembershipModel.workspace_id == WorkspaceModel.id)
            .where(
                and_(
                    MembershipModel.user_id == user_id,
                    WorkspaceModel.tenant_id == tenant_id,
                )
            )
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None
