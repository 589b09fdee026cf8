"""HTTP surface of the management context."""

from management.presentation.breadcrumbs import router as breadcrumbs_router
from management.presentation.routes import router

__all__ = ["breadcrumbs_router", "router"]
