"""SQLAlchemy ORM model for the sessions table."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.models import Base

if TYPE_CHECKING:
    from identity.infrastructure.models.user import UserModel


class SessionModel(Base):
    """ORM model for sessions table.

    The primary key is the opaque session token presented by the browser.
    """

    __tablename__ = "sessions"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )

    user: Mapped[UserModel] = relationship(back_populates="sessions")

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<SessionModel(user_id={self.user_id}, expires_at={self.expires_at})>"
