"""SQLAlchemy ORM model for the webhooks table."""

from sqlalchemy import Boolean, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.models import Base, TimestampMixin
from infrastructure.tenancy.models import WorkspaceModel


class WebhookModel(Base, TimestampMixin):
    """ORM model for webhooks table."""

    __tablename__ = "webhooks"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    workspace_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    destination: Mapped[str] = mapped_column(Text, nullable=False)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    workspace: Mapped[WorkspaceModel] = relationship(WorkspaceModel, lazy="raise")

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<WebhookModel(id={self.id}, workspace_id={self.workspace_id}, "
            f"enabled={self.enabled})>"
        )
