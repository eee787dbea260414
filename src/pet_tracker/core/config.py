"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor principles.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        description="Async SQLAlchemy connection string (e.g. postgresql+asyncpg://...)",
    )

    # Reverse geocoding (PositionStack)
    positionstack_api_key: str = Field(
        default="",
        description="PositionStack access key (reverse geocoding is skipped when empty)",
    )
    positionstack_base_url: str = Field(
        default="http://api.positionstack.com/v1",
        description="PositionStack API base URL",
    )
    positionstack_timeout: float = Field(
        default=10.0,
        description="PositionStack request timeout in seconds",
        gt=0,
    )

    @field_validator("positionstack_base_url")
    @classmethod
    def validate_positionstack_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            msg = "positionstack_base_url must be an http(s) URL"
            raise ValueError(msg)
        return v.rstrip("/")

    # Batch resolution
    resolve_pending_limit: int = Field(
        default=100,
        description="Default number of unresolved sightings processed per resolve-pending run",
        gt=0,
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )

    # CORS
    cors_origins: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins (must be explicitly configured)",
    )

    # Environment
    environment: str = Field(
        default="production",
        description="Deployment environment name (e.g. production, dev, staging)",
    )

    # API
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API version prefix",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        if not self.cors_origins.strip():
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()  # type: ignore[call-arg]
