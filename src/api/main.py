"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from audit.dependencies import close_audit_sink
from infrastructure.database.dependencies import close_database_connections
from infrastructure.logging import configure_logging
from infrastructure.settings import get_settings
from infrastructure.version import __version__
from management.presentation import breadcrumbs_router
from management.presentation import router as procedures_router


@asynccontextmanager
async def keydeck_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Database engines (created lazily, disposed on shutdown)
    - The shared audit log sink (closed on shutdown)
    """
    yield

    await close_audit_sink()
    await close_database_connections()


settings = get_settings()
configure_logging(debug=settings.debug)

app = FastAPI(
    title=settings.app_name,
    description="Administrative backend for API keys, roles and webhooks",
    version=__version__,
    lifespan=keydeck_lifespan,
)

# Management bounded context routes
app.include_router(procedures_router)
app.include_router(breadcrumbs_router)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}
