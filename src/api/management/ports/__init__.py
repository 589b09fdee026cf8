"""Ports for the management bounded context."""

from management.ports.repositories import (
    IApiRepository,
    IKeyRepository,
    IRoleRepository,
    IWebhookRepository,
    IWorkspaceRepository,
)

__all__ = [
    "IApiRepository",
    "IKeyRepository",
    "IRoleRepository",
    "IWebhookRepository",
    "IWorkspaceRepository",
]
