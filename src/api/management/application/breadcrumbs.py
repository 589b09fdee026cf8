"""Breadcrumb trails for dashboard pages.

A ``BreadcrumbResolver`` lives for one request. API lookups are memoised
by id so that rendering several crumbs for the same API reads it once.
Trails are hidden (empty) when the API is missing or belongs to another
tenant.
"""

from __future__ import annotations

from dataclasses import dataclass

from management.domain.aggregates import Api
from management.ports.repositories import IApiRepository
from shared_kernel.procedures import is_owned_by


@dataclass(frozen=True)
class Crumb:
    """One entry of a breadcrumb trail; ``href`` is None for the current page."""

    label: str
    href: str | None = None


class BreadcrumbResolver:
    """Resolves breadcrumb trails for a single tenant during one request."""

    def __init__(self, apis: IApiRepository, tenant_id: str) -> None:
        self._apis = apis
        self._tenant_id = tenant_id
        self._api_cache: dict[str, Api | None] = {}

    async def get_api(self, api_id: str) -> Api | None:
        """Load an API once per resolver."""
        if api_id not in self._api_cache:
            self._api_cache[api_id] = await self._apis.get_by_id(api_id)
        return self._api_cache[api_id]

    async def new_key_trail(self, api_id: str, key_auth_id: str) -> tuple[Crumb, ...]:
        """Trail for the "create new key" page of an API."""
        api = await self.get_api(api_id)
        if api is None or not is_owned_by(api, self._tenant_id):
            return ()

        return (
            Crumb(label="APIs", href="/apis"),
            Crumb(label=api.name, href=f"/apis/{api.id}"),
            Crumb(label="Keys", href=f"/apis/{api.id}/keys/{key_auth_id}"),
            Crumb(label="Create new key"),
        )
