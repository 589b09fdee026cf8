"""Persistence exceptions shared by repository ports and implementations."""


class PersistenceError(Exception):
    """Raised when a repository read or write statement fails.

    Repository implementations wrap driver and ORM errors in this type so
    that application code never depends on SQLAlchemy exception classes.
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation
