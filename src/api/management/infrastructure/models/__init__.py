"""SQLAlchemy ORM models for the management bounded context."""

from management.infrastructure.models.api import ApiModel
from management.infrastructure.models.key import KeyModel
from management.infrastructure.models.rbac import (
    PermissionModel,
    RoleModel,
    RolePermissionModel,
)
from management.infrastructure.models.webhook import WebhookModel

__all__ = [
    "ApiModel",
    "KeyModel",
    "PermissionModel",
    "RoleModel",
    "RolePermissionModel",
    "WebhookModel",
]
