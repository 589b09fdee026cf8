"""Mutation procedures of the management context.

Each factory closes over the repositories it needs and returns a
``MutationProcedure``. ``ManagementProcedures`` bundles the full set for
one request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from management.application.procedures.api import update_ip_whitelist_procedure
from management.application.procedures.key import update_key_name_procedure
from management.application.procedures.rbac import (
    disconnect_permission_from_role_procedure,
    update_role_procedure,
)
from management.application.procedures.webhook import toggle_webhook_procedure
from management.ports.repositories import (
    IApiRepository,
    IKeyRepository,
    IRoleRepository,
    IWebhookRepository,
    IWorkspaceRepository,
)
from shared_kernel.procedures import MutationProcedure


@dataclass(frozen=True)
class ManagementProcedures:
    """The five dashboard mutations, bound to one set of repositories."""

    update_ip_whitelist: MutationProcedure[Any, Any, None]
    update_key_name: MutationProcedure[Any, Any, bool]
    disconnect_permission_from_role: MutationProcedure[Any, Any, None]
    update_role: MutationProcedure[Any, Any, None]
    toggle_webhook: MutationProcedure[Any, Any, Any]

    @classmethod
    def build(
        cls,
        *,
        workspaces: IWorkspaceRepository,
        apis: IApiRepository,
        keys: IKeyRepository,
        roles: IRoleRepository,
        webhooks: IWebhookRepository,
    ) -> ManagementProcedures:
        return cls(
            update_ip_whitelist=update_ip_whitelist_procedure(apis),
            update_key_name=update_key_name_procedure(keys),
            disconnect_permission_from_role=disconnect_permission_from_role_procedure(
                workspaces, roles
            ),
            update_role=update_role_procedure(roles),
            toggle_webhook=toggle_webhook_procedure(webhooks),
        )

    def by_name(self) -> dict[str, MutationProcedure[Any, Any, Any]]:
        """Index the procedures by their public name."""
        procedures = (
            self.update_ip_whitelist,
            self.update_key_name,
            self.disconnect_permission_from_role,
            self.update_role,
            self.toggle_webhook,
        )
        return {procedure.name: procedure for procedure in procedures}


__all__ = [
    "ManagementProcedures",
    "disconnect_permission_from_role_procedure",
    "toggle_webhook_procedure",
    "update_ip_whitelist_procedure",
    "update_key_name_procedure",
    "update_role_procedure",
]
