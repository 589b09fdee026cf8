"""SQLAlchemy ORM model for the workspaces table.

Workspaces are the resource-owning containers of a tenant. Both the
identity context (memberships) and the management context (APIs, keys,
roles, permissions, webhooks) reference this table.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class WorkspaceModel(Base, TimestampMixin):
    """ORM model for workspaces table.

    Notes:
    - tenant_id is unique: a tenant (organisation or personal account) owns
      exactly one workspace
    - Owned resources declare the relationship on their side only
    """

    __tablename__ = "workspaces"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    tenant_id: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<WorkspaceModel(id={self.id}, tenant_id={self.tenant_id}, "
            f"name={self.name})>"
        )
