"""SQLAlchemy ORM model for the keys table.

Only key metadata relevant to the dashboard is mapped; the hashed secret
is managed by the key issuing service.
"""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.models import Base, TimestampMixin
from infrastructure.tenancy.models import WorkspaceModel


class KeyModel(Base, TimestampMixin):
    """ORM model for keys table."""

    __tablename__ = "keys"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    workspace_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    key_auth_id: Mapped[str | None] = mapped_column(
        String(255), nullable=True, index=True
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    start: Mapped[str] = mapped_column(String(256), nullable=False, default="")

    workspace: Mapped[WorkspaceModel] = relationship(WorkspaceModel, lazy="raise")

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<KeyModel(id={self.id}, workspace_id={self.workspace_id}, name={self.name})>"
