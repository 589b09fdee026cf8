"""SQLAlchemy ORM model for the memberships table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Enum, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from identity.domain.value_objects import MembershipRole
from infrastructure.database.models import Base, TimestampMixin

if TYPE_CHECKING:
    from identity.infrastructure.models.user import UserModel


class MembershipModel(Base, TimestampMixin):
    """ORM model for memberships table.

    A user holds at most one membership per workspace.
    """

    __tablename__ = "memberships"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    workspace_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role: Mapped[MembershipRole] = mapped_column(
        Enum(
            MembershipRole,
            name="membership_role",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=MembershipRole.MEMBER,
    )

    user: Mapped[UserModel] = relationship(back_populates="memberships")

    __table_args__ = (UniqueConstraint("user_id", "workspace_id"),)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<MembershipModel(user_id={self.user_id}, "
            f"workspace_id={self.workspace_id}, role={self.role})>"
        )
