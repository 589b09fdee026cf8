"""HTTP audit log sink.

Posts audit events as newline-delimited JSON to an events ingestion API
(``POST {base_url}/v0/events?name={datasource}``) authenticated with a
bearer token. The ingestion service stores events outside the
transactional database.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

import httpx

from audit.ports.exceptions import AuditIngestionError
from shared_kernel.audit.value_objects import AuditEvent


class HttpAuditLogSink:
    """AuditLogSink backed by an HTTP events ingestion endpoint."""

    def __init__(
        self,
        base_url: str,
        token: str,
        datasource: str = "audit_logs",
        timeout_seconds: float = 5.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the sink.

        Args:
            base_url: Root URL of the ingestion API
            token: Bearer token with append rights on the datasource
            datasource: Name of the datasource receiving events
            timeout_seconds: Timeout applied when the sink creates its own client
            client: Optional pre-configured client (the sink will not close it)
        """
        self._events_url = f"{base_url.rstrip('/')}/v0/events"
        self._token = token
        self._datasource = datasource
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds)

    async def ingest(self, events: Sequence[AuditEvent]) -> None:
        """Send a batch of events in one request.

        Raises:
            AuditIngestionError: On transport errors or a non-2xx response
        """
        if not events:
            return

        body = "\n".join(
            json.dumps(event.to_payload(), separators=(",", ":")) for event in events
        )
        try:
            response = await self._client.post(
                self._events_url,
                params={"name": self._datasource},
                content=body.encode("utf-8"),
                headers={
                    "Authorization": f"Bearer {self._token}",
                    "Content-Type": "application/x-ndjson",
                },
            )
        except httpx.HTTPError as e:
            raise AuditIngestionError(f"Audit ingestion request failed: {e}") from e

        if response.is_error:
            raise AuditIngestionError(
                f"Audit ingestion rejected with status {response.status_code}",
                status_code=response.status_code,
            )

    async def close(self) -> None:
        """Close the HTTP client if this sink created it."""
        if self._owns_client:
            await self._client.aclose()
