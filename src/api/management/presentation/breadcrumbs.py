"""Breadcrumb routes for dashboard pages."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from management.application.breadcrumbs import BreadcrumbResolver
from management.dependencies import get_breadcrumb_resolver
from management.presentation.models import BreadcrumbItem, BreadcrumbResponse

router = APIRouter(
    prefix="/breadcrumbs",
    tags=["breadcrumbs"],
)


@router.get(
    "/apis/{api_id}/keys/{key_auth_id}/new",
    response_model=BreadcrumbResponse,
    summary="Breadcrumbs for the create-key page",
    description="""
Resolve the breadcrumb trail for creating a key under an API.

Returns an empty list when the API does not exist or belongs to a different
tenant.
""",
)
async def new_key_breadcrumbs(
    api_id: str,
    key_auth_id: str,
    resolver: Annotated[BreadcrumbResolver, Depends(get_breadcrumb_resolver)],
) -> BreadcrumbResponse:
    trail = await resolver.new_key_trail(api_id, key_auth_id)
    return BreadcrumbResponse(items=[BreadcrumbItem.from_domain(c) for c in trail])
