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
        default="sqlite+aiosqlite:///./voter_info.db",
        description="Async SQLAlchemy connection string for the record store",
    )

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v.strip():
            msg = "database_url must not be empty"
            raise ValueError(msg)
        return v

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )

    # Popup layout metrics
    popup_max_line_chars: int = Field(
        default=36,
        description="Characters per line before popup text wraps",
        gt=0,
    )
    popup_padding: float = Field(
        default=8.0,
        description="Inner padding of the popup in points",
        ge=0,
    )
    popup_min_width: float = Field(
        default=80.0,
        description="Minimum popup width in points",
        gt=0,
    )
    popup_min_height: float = Field(
        default=40.0,
        description="Minimum popup height in points",
        gt=0,
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


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
