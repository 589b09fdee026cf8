"""SQLAlchemy ORM model for the apis table."""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.models import Base, TimestampMixin
from infrastructure.tenancy.models import WorkspaceModel


class ApiModel(Base, TimestampMixin):
    """ORM model for apis table.

    Notes:
    - ip_whitelist is a comma-joined list of addresses; NULL disables the check
    - key_auth_id links the API to the key space its keys are issued from
    """

    __tablename__ = "apis"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    workspace_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(512), nullable=False)
    key_auth_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    ip_whitelist: Mapped[str | None] = mapped_column(Text, nullable=True)

    workspace: Mapped[WorkspaceModel] = relationship(WorkspaceModel, lazy="raise")

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<ApiModel(id={self.id}, workspace_id={self.workspace_id}, name={self.name})>"
