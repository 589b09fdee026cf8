"""Exceptions raised by audit log sinks."""


class AuditIngestionError(Exception):
    """Raised when an audit log sink fails to persist events.

    Attributes:
        status_code: HTTP status returned by the ingestion API, if any
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
