"""Response models for management routes."""

from __future__ import annotations

from pydantic import BaseModel, Field

from management.application.breadcrumbs import Crumb


class ToggleWebhookResponse(BaseModel):
    """Response for webhook.toggle."""

    enabled: bool = Field(..., description="Stored enabled flag")


class ProcedureErrorDetail(BaseModel):
    """Body of a failed procedure call (nested under ``detail``)."""

    code: str = Field(..., description="BAD_REQUEST, NOT_FOUND or INTERNAL_SERVER_ERROR")
    message: str = Field(..., description="Human-readable explanation")
    issues: list[dict] | None = Field(
        default=None, description="Field-level validation issues"
    )


class ProcedureErrorResponse(BaseModel):
    """Error envelope returned by procedure routes."""

    detail: ProcedureErrorDetail


class BreadcrumbItem(BaseModel):
    """One breadcrumb entry; href is null for the current page."""

    label: str
    href: str | None = None

    @classmethod
    def from_domain(cls, crumb: Crumb) -> BreadcrumbItem:
        return cls(label=crumb.label, href=crumb.href)


class BreadcrumbResponse(BaseModel):
    """Ordered breadcrumb trail; empty when the resource is hidden."""

    items: list[BreadcrumbItem]
