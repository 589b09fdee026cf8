"""SQLAlchemy adapters for the management bounded context."""

from management.infrastructure.api_repository import ApiRepository
from management.infrastructure.key_repository import KeyRepository
from management.infrastructure.role_repository import RoleRepository
from management.infrastructure.webhook_repository import WebhookRepository
from management.infrastructure.workspace_repository import WorkspaceRepository

__all__ = [
    "ApiRepository",
    "KeyRepository",
    "RoleRepository",
    "WebhookRepository",
    "WorkspaceRepository",
]
