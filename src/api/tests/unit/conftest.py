"""Unit test fixtures with mocked dependencies."""

from __future__ import annotations

from collections.abc import Sequence
from unittest.mock import AsyncMock, Mock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from audit.application import AuditRecorder
from management.domain.aggregates import Workspace
from shared_kernel.audit.value_objects import AuditEvent
from shared_kernel.auth.context import AuthContext, AuthenticatedUser, RequestMetadata
from shared_kernel.procedures import ProcedureContext


class RecordingAuditSink:
    """AuditLogSink keeping every ingested event in memory."""

    def __init__(self) -> None:
        self.events: list[AuditEvent] = []
        self.closed = False

    async def ingest(self, events: Sequence[AuditEvent]) -> None:
        self.events.extend(events)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def request_metadata() -> RequestMetadata:
    return RequestMetadata(location="203.0.113.7", user_agent="pytest-agent/1.0")


@pytest.fixture
def auth_context(request_metadata: RequestMetadata) -> AuthContext:
    """Caller acting for tenant_a."""
    return AuthContext(
        tenant_id="tenant_a",
        user=AuthenticatedUser(id="user_alice"),
        audit=request_metadata,
    )


@pytest.fixture
def workspace() -> Workspace:
    """Workspace owned by the caller's tenant."""
    return Workspace(id="ws_a", tenant_id="tenant_a", name="Acme")


@pytest.fixture
def foreign_workspace() -> Workspace:
    """Workspace owned by another tenant."""
    return Workspace(id="ws_b", tenant_id="tenant_b", name="Globex")


@pytest.fixture
def audit_sink() -> RecordingAuditSink:
    return RecordingAuditSink()


@pytest.fixture
def mock_session() -> AsyncMock:
    """Mock AsyncSession; commit and rollback are awaitable."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def mock_procedure_probe() -> Mock:
    return Mock()


@pytest.fixture
def procedure_context(
    mock_session: AsyncMock,
    auth_context: AuthContext,
    audit_sink: RecordingAuditSink,
    mock_procedure_probe: Mock,
) -> ProcedureContext:
    """ProcedureContext wired to the recording sink and a mock session."""
    return ProcedureContext(
        session=mock_session,
        auth=auth_context,
        audit=AuditRecorder(sink=audit_sink, probe=Mock()),
        probe=mock_procedure_probe,
    )
