"""Error taxonomy for mutation procedures.

Every failure a caller can observe is one of three kinds:

- ProcedureValidationError: malformed input, rejected before any data access
- ResourceNotFoundError: the resource is absent or owned by another tenant
- InternalProcedureError: the data layer failed while applying the mutation

The presentation layer maps ``code``/``http_status`` onto its transport.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

SUPPORT_EMAIL = "support@keydeck.dev"


class ProcedureError(Exception):
    """Base class for errors surfaced to procedure callers."""

    code: str = "INTERNAL_SERVER_ERROR"
    http_status: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        """Serialize for transport."""
        return {"code": self.code, "message": self.message}


@dataclass(frozen=True)
class ValidationIssue:
    """One field-level validation problem.

    Attributes:
        path: Location of the offending field, e.g. ("ipWhitelist",)
        message: Human-readable explanation
    """

    path: tuple[str | int, ...]
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"path": list(self.path), "message": self.message}


class ProcedureValidationError(ProcedureError):
    """Raised when a procedure payload fails validation.

    The first issue identifies the first invalid field or token.
    """

    code = "BAD_REQUEST"
    http_status = 400

    def __init__(self, issues: list[ValidationIssue]):
        first = issues[0].message if issues else "Invalid input"
        super().__init__(first)
        self.issues = issues

    @classmethod
    def from_pydantic(cls, error: ValidationError) -> ProcedureValidationError:
        """Convert a pydantic ValidationError, preserving error order."""
        issues = [
            ValidationIssue(path=tuple(item["loc"]), message=_clean(item["msg"]))
            for item in error.errors()
        ]
        return cls(issues)

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "issues": [issue.to_dict() for issue in self.issues],
        }


class ResourceNotFoundError(ProcedureError):
    """Raised when a resource is missing or belongs to another tenant.

    Callers cannot tell the two cases apart.
    """

    code = "NOT_FOUND"
    http_status = 404


class InternalProcedureError(ProcedureError):
    """Raised when the data layer fails while executing a procedure."""

    code = "INTERNAL_SERVER_ERROR"
    http_status = 500


def _clean(message: str) -> str:
    """Strip pydantic's "Value error, " prefix from custom validator messages."""
    prefix = "Value error, "
    return message[len(prefix) :] if message.startswith(prefix) else message
