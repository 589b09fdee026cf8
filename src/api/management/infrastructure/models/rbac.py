"""SQLAlchemy ORM models for roles, permissions and their join table."""

from sqlalchemy import ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.models import Base, TimestampMixin
from infrastructure.tenancy.models import WorkspaceModel


class RoleModel(Base, TimestampMixin):
    """ORM model for roles table.

    Role names are unique within a workspace.
    """

    __tablename__ = "roles"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    workspace_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(512), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    workspace: Mapped[WorkspaceModel] = relationship(WorkspaceModel, lazy="raise")

    __table_args__ = (UniqueConstraint("name", "workspace_id"),)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<RoleModel(id={self.id}, workspace_id={self.workspace_id}, name={self.name})>"


class PermissionModel(Base, TimestampMixin):
    """ORM model for permissions table.

    Permission names are unique within a workspace.
    """

    __tablename__ = "permissions"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    workspace_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(512), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (UniqueConstraint("name", "workspace_id"),)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<PermissionModel(id={self.id}, workspace_id={self.workspace_id}, "
            f"name={self.name})>"
        )


class RolePermissionModel(Base, TimestampMixin):
    """ORM model for the roles_permissions join table.

    Every link is scoped to a workspace; deletes filter on workspace_id so
    one tenant can never unlink another tenant's role and permission.
    """

    __tablename__ = "roles_permissions"

    role_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    )
    permission_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("permissions.id", ondelete="CASCADE"),
        primary_key=True,
    )
    workspace_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<RolePermissionModel(role_id={self.role_id}, "
            f"permission_id={self.permission_id}, workspace_id={self.workspace_id})>"
        )
