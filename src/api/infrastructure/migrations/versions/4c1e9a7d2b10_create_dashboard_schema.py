"""create dashboard schema

Revision ID: 4c1e9a7d2b10
Revises:
Create Date: 2026-10-19 09:12:44.318201

Creates the identity tables (users, sessions, oauth, memberships, otps),
the workspaces table and the workspace-owned management tables (apis,
keys, roles, permissions, roles_permissions, webhooks).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "4c1e9a7d2b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _workspace_fk() -> sa.Column:
    return sa.Column(
        "workspace_id",
        sa.String(255),
        sa.ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )


def _user_fk() -> sa.Column:
    return sa.Column(
        "user_id",
        sa.String(255),
        sa.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )


def upgrade() -> None:
    """Create all tables.

    Key constraints:
    - workspaces.tenant_id is unique (one workspace per tenant)
    - memberships are unique per (user_id, workspace_id)
    - roles_permissions uses the composite primary key (role_id, permission_id)
    - every child row is removed with its user or workspace (CASCADE)
    """
    op.create_table(
        "workspaces",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("tenant_id", sa.String(255), nullable=False, unique=True),
        sa.Column("name", sa.String(255), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("email", sa.String(320), nullable=False, unique=True),
        sa.Column("first_name", sa.String(255), nullable=True),
        sa.Column("last_name", sa.String(255), nullable=True),
        sa.Column("profile_picture_url", sa.String(2048), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "sessions",
        sa.Column("id", sa.String(255), primary_key=True),
        _user_fk(),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "oauth",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column(
            "provider",
            sa.Enum("github", "google", name="oauth_provider"),
            nullable=False,
        ),
        sa.Column("provider_user_id", sa.String(255), nullable=False),
        _user_fk(),
        *_timestamps(),
    )

    op.create_table(
        "memberships",
        sa.Column("id", sa.String(255), primary_key=True),
        _user_fk(),
        _workspace_fk(),
        sa.Column(
            "role",
            sa.Enum("member", "admin", "owner", name="membership_role"),
            nullable=False,
            server_default="member",
        ),
        *_timestamps(),
        sa.UniqueConstraint("user_id", "workspace_id"),
    )

    op.create_table(
        "otps",
        sa.Column("id", sa.String(255), primary_key=True),
        _user_fk(),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("otp", sa.String(6), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "apis",
        sa.Column("id", sa.String(255), primary_key=True),
        _workspace_fk(),
        sa.Column("name", sa.String(512), nullable=False),
        sa.Column("key_auth_id", sa.String(255), nullable=True),
        sa.Column("ip_whitelist", sa.Text, nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "keys",
        sa.Column("id", sa.String(255), primary_key=True),
        _workspace_fk(),
        sa.Column("key_auth_id", sa.String(255), nullable=True, index=True),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("start", sa.String(256), nullable=False, server_default=""),
        *_timestamps(),
    )

    op.create_table(
        "roles",
        sa.Column("id", sa.String(255), primary_key=True),
        _workspace_fk(),
        sa.Column("name", sa.String(512), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("name", "workspace_id"),
    )

    op.create_table(
        "permissions",
        sa.Column("id", sa.String(255), primary_key=True),
        _workspace_fk(),
        sa.Column("name", sa.String(512), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("name", "workspace_id"),
    )

    op.create_table(
        "roles_permissions",
        sa.Column(
            "role_id",
            sa.String(255),
            sa.ForeignKey("roles.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "permission_id",
            sa.String(255),
            sa.ForeignKey("permissions.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        _workspace_fk(),
        *_timestamps(),
    )

    op.create_table(
        "webhooks",
        sa.Column("id", sa.String(255), primary_key=True),
        _workspace_fk(),
        sa.Column("destination", sa.Text, nullable=False),
        sa.Column("enabled", sa.Boolean, nullable=False, server_default=sa.true()),
        *_timestamps(),
    )


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    for table in (
        "webhooks",
        "roles_permissions",
        "permissions",
        "roles",
        "keys",
        "apis",
        "otps",
        "memberships",
        "oauth",
        "sessions",
        "users",
        "workspaces",
    ):
        op.drop_table(table)

    sa.Enum(name="membership_role").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="oauth_provider").drop(op.get_bind(), checkfirst=True)
