"""Integration test fixtures backed by a throwaway SQLite database.

The schema is created from the ORM metadata and seeded with two tenants,
each owning one workspace with an API, a key, roles, a permission link and
a webhook. Tests exercise the real repositories against that data.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator, Sequence
from datetime import UTC, datetime, timedelta
from pathlib import Path
from unittest.mock import Mock

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from audit.application import AuditRecorder
from identity.domain.value_objects import MembershipRole
from identity.infrastructure.models import MembershipModel, SessionModel, UserModel
from infrastructure.database.models import Base
from infrastructure.tenancy.models import WorkspaceModel
from management.application.procedures import ManagementProcedures
from management.infrastructure import (
    ApiRepository,
    KeyRepository,
    RoleRepository,
    WebhookRepository,
    WorkspaceRepository,
)
from management.infrastructure.models import (
    ApiModel,
    KeyModel,
    PermissionModel,
    RoleModel,
    RolePermissionModel,
    WebhookModel,
)
from shared_kernel.audit.value_objects import AuditEvent
from shared_kernel.auth.context import AuthContext, AuthenticatedUser, RequestMetadata
from shared_kernel.procedures import ProcedureContext

ALICE_TOKEN = "sess_alice"
BOB_TOKEN = "sess_bob"
EXPIRED_TOKEN = "sess_alice_expired"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (requires database)",
    )


class RecordingAuditSink:
    """AuditLogSink keeping every ingested event in memory."""

    def __init__(self) -> None:
        self.events: list[AuditEvent] = []

    async def ingest(self, events: Sequence[AuditEvent]) -> None:
        self.events.extend(events)

    async def close(self) -> None:
        pass


def _seed_rows(now: datetime) -> list[Base]:
    return [
        WorkspaceModel(id="ws_a", tenant_id="tenant_a", name="Acme"),
        WorkspaceModel(id="ws_b", tenant_id="tenant_b", name="Globex"),
        UserModel(id="user_alice", email="alice@acme.test"),
        UserModel(id="user_bob", email="bob@globex.test"),
        MembershipModel(
            id="mem_alice",
            user_id="user_alice",
            workspace_id="ws_a",
            role=MembershipRole.ADMIN,
        ),
        MembershipModel(id="mem_bob", user_id="user_bob", workspace_id="ws_b"),
        SessionModel(
            id=ALICE_TOKEN, user_id="user_alice", expires_at=now + timedelta(hours=1)
        ),
        SessionModel(id=BOB_TOKEN, user_id="user_bob", expires_at=now + timedelta(hours=1)),
        SessionModel(
            id=EXPIRED_TOKEN,
            user_id="user_alice",
            expires_at=now - timedelta(minutes=5),
        ),
        ApiModel(id="api_a", workspace_id="ws_a", name="payments", key_auth_id="ks_a"),
        ApiModel(
            id="api_b",
            workspace_id="ws_b",
            name="billing",
            key_auth_id="ks_b",
            ip_whitelist="10.0.0.1",
        ),
        KeyModel(id="key_a", workspace_id="ws_a", key_auth_id="ks_a", name="ci"),
        KeyModel(id="key_b", workspace_id="ws_b", key_auth_id="ks_b", name="prod"),
        RoleModel(id="role_a", workspace_id="ws_a", name="admin"),
        RoleModel(id="role_a_reader", workspace_id="ws_a", name="reader"),
        RoleModel(id="role_b", workspace_id="ws_b", name="admin"),
        PermissionModel(id="perm_a", workspace_id="ws_a", name="api.read"),
        PermissionModel(id="perm_b", workspace_id="ws_b", name="api.read"),
        RolePermissionModel(role_id="role_a", permission_id="perm_a", workspace_id="ws_a"),
        RolePermissionModel(role_id="role_b", permission_id="perm_b", workspace_id="ws_b"),
        WebhookModel(
            id="wh_a", workspace_id="ws_a", destination="https://acme.test/hook"
        ),
        WebhookModel(
            id="wh_b",
            workspace_id="ws_b",
            destination="https://globex.test/hook",
            enabled=False,
        ),
    ]


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """SQLite engine with the full schema and seed data."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'keydeck.db'}")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    sessionmaker = async_sessionmaker(engine, expire_on_commit=False)
    async with sessionmaker() as session:
        session.add_all(_seed_rows(datetime.now(UTC)))
        await session.commit()

    yield engine
    await engine.dispose()


@pytest.fixture
def sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


@pytest.fixture
async def session(
    sessionmaker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    async with sessionmaker() as session:
        yield session


@pytest.fixture
async def verify_session(
    sessionmaker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Independent session for asserting on committed state."""
    async with sessionmaker() as session:
        yield session


@pytest.fixture
def audit_sink() -> RecordingAuditSink:
    return RecordingAuditSink()


@pytest.fixture
def alice() -> AuthContext:
    """Alice acting for tenant_a."""
    return AuthContext(
        tenant_id="tenant_a",
        user=AuthenticatedUser(id="user_alice"),
        audit=RequestMetadata(location="198.51.100.4", user_agent="integration/1.0"),
    )


@pytest.fixture
def procedures(session: AsyncSession) -> ManagementProcedures:
    """Procedures wired to real repositories on the test session."""
    return ManagementProcedures.build(
        workspaces=WorkspaceRepository(session),
        apis=ApiRepository(session),
        keys=KeyRepository(session),
        roles=RoleRepository(session),
        webhooks=WebhookRepository(session),
    )


@pytest.fixture
def ctx(
    session: AsyncSession,
    alice: AuthContext,
    audit_sink: RecordingAuditSink,
) -> ProcedureContext:
    return ProcedureContext(
        session=session,
        auth=alice,
        audit=AuditRecorder(sink=audit_sink, probe=Mock()),
        probe=Mock(),
    )
