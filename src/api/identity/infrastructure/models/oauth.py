"""SQLAlchemy ORM model for the oauth table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from identity.domain.value_objects import OAuthProvider
from infrastructure.database.models import Base, TimestampMixin

if TYPE_CHECKING:
    from identity.infrastructure.models.user import UserModel


class OAuthModel(Base, TimestampMixin):
    """ORM model for oauth table. A user may link several providers."""

    __tablename__ = "oauth"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    provider: Mapped[OAuthProvider] = mapped_column(
        Enum(
            OAuthProvider,
            name="oauth_provider",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    )
    provider_user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user: Mapped[UserModel] = relationship(back_populates="oauth_links")

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<OAuthModel(id={self.id}, provider={self.provider}, "
            f"user_id={self.user_id})>"
        )
