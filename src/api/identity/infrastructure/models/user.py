"""SQLAlchemy ORM model for the users table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.models import Base, TimestampMixin

if TYPE_CHECKING:
    from identity.infrastructure.models.membership import MembershipModel
    from identity.infrastructure.models.oauth import OAuthModel
    from identity.infrastructure.models.otp import OtpModel
    from identity.infrastructure.models.session import SessionModel


class UserModel(Base, TimestampMixin):
    """ORM model for users table.

    Sessions, OAuth links, memberships and passcodes are removed together
    with their user.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    first_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    profile_picture_url: Mapped[str | None] = mapped_column(
        String(2048), nullable=True
    )

    sessions: Mapped[list[SessionModel]] = relationship(
        back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
    oauth_links: Mapped[list[OAuthModel]] = relationship(
        back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
    memberships: Mapped[list[MembershipModel]] = relationship(
        back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
    otps: Mapped[list[OtpModel]] = relationship(
        back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<UserModel(id={self.id}, email={self.email})>"
