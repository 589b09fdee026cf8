"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        KEYDECK_DB_HOST: Database host (default: localhost)
        KEYDECK_DB_PORT: Database port (default: 5432)
        KEYDECK_DB_DATABASE: Database name (default: keydeck)
        KEYDECK_DB_USERNAME: Database user (default: keydeck)
        KEYDECK_DB_PASSWORD: Database password (required in production)
        KEYDECK_DB_URL: Full SQLAlchemy URL, overrides the fields above
        KEYDECK_DB_POOL_MIN_CONNECTIONS: Minimum connections in pool (default: 2)
        KEYDECK_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
    """

    model_config = SettingsConfigDict(
        env_prefix="KEYDECK_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="keydeck", description="Database name")
    username: str = Field(default="keydeck", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    url: str | None = Field(
        default=None,
        description="Explicit async SQLAlchemy URL (e.g. sqlite+aiosqlite://)",
    )
    pool_min_connections: int = Field(
        default=2,
        description="Minimum connections in pool",
        ge=1,
        le=100,
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )

    @model_validator(mode="after")
    def validate_pool_settings(self) -> "DatabaseSettings":
        """Validate pool max >= min."""
        if self.pool_max_connections < self.pool_min_connections:
            raise ValueError(
                f"pool_max_connections ({self.pool_max_connections}) must be >= "
                f"pool_min_connections ({self.pool_min_connections})"
            )
        return self

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        if self.url is not None:
            return self.url.split("@")[-1]
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class AuditSettings(BaseSettings):
    """Audit log ingestion settings.

    Environment variables:
        KEYDECK_AUDIT_INGEST_URL: Base URL of the events ingestion API. When
            unset, audit events are written to the application log instead.
        KEYDECK_AUDIT_TOKEN: Bearer token for the ingestion API
        KEYDECK_AUDIT_DATASOURCE: Target datasource name (default: audit_logs)
        KEYDECK_AUDIT_TIMEOUT_SECONDS: Request timeout (default: 5.0)
    """

    model_config = SettingsConfigDict(
        env_prefix="KEYDECK_AUDIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ingest_url: str | None = Field(
        default=None,
        description="Base URL of the audit events ingestion API",
    )
    token: SecretStr = Field(
        default=SecretStr(""),
        description="Bearer token for the ingestion API",
    )
    datasource: str = Field(
        default="audit_logs",
        description="Datasource receiving audit events",
    )
    timeout_seconds: float = Field(
        default=5.0,
        description="Timeout for a single ingestion request",
        gt=0,
    )


class AuthSettings(BaseSettings):
    """Authentication context settings.

    Environment variables:
        KEYDECK_AUTH_SESSION_COOKIE: Cookie carrying the session token
        KEYDECK_AUTH_TENANT_HEADER: Header selecting the active tenant
    """

    model_config = SettingsConfigDict(
        env_prefix="KEYDECK_AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    session_cookie: str = Field(
        default="keydeck_session",
        description="Name of the session cookie",
    )
    tenant_header: str = Field(
        default="X-Tenant-ID",
        description="Header used to select an organisation tenant",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Keydeck API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def audit(self) -> AuditSettings:
        """Get audit settings."""
        return get_audit_settings()

    @property
    def auth(self) -> AuthSettings:
        """Get authentication settings."""
        return get_auth_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()


@lru_cache
def get_audit_settings() -> AuditSettings:
    """Get cached audit settings."""
    return AuditSettings()


@lru_cache
def get_auth_settings() -> AuthSettings:
    """Get cached authentication settings."""
    return AuthSettings()
