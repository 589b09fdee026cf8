"""Integration tests for breadcrumb resolution over ApiRepository."""

from __future__ import annotations

import pytest

from management.application.breadcrumbs import BreadcrumbResolver, Crumb
from management.infrastructure import ApiRepository

pytestmark = pytest.mark.integration


async def test_trail_for_own_api(session):
    resolver = BreadcrumbResolver(apis=ApiRepository(session), tenant_id="tenant_a")

    trail = await resolver.new_key_trail("api_a", "ks_a")

    assert trail == (
        Crumb(label="APIs", href="/apis"),
        Crumb(label="payments", href="/apis/api_a"),
        Crumb(label="Keys", href="/apis/api_a/keys/ks_a"),
        Crumb(label="Create new key"),
    )


async def test_foreign_api_yields_empty_trail(session):
    resolver = BreadcrumbResolver(apis=ApiRepository(session), tenant_id="tenant_a")

    assert await resolver.new_key_trail("api_b", "ks_b") == ()
