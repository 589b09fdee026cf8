"""SQLAlchemy ORM model for the otps table."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.models import Base, TimestampMixin

if TYPE_CHECKING:
    from identity.infrastructure.models.user import UserModel


class OtpModel(Base, TimestampMixin):
    """ORM model for otps table (email verification passcodes)."""

    __tablename__ = "otps"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    otp: Mapped[str] = mapped_column(String(6), nullable=False)
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )

    user: Mapped[UserModel] = relationship(back_populates="otps")

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<OtpModel(id={self.id}, user_id={self.user_id})>"
