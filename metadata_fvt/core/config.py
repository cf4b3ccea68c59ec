"""Harness settings with Pydantic validation and environment loading."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Harness settings loaded from FVT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FVT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Platform
    platform_url: str = Field(
        default="https://localhost:9443",
        description="Root URL of the metadata server platform",
    )
    servers: str = Field(
        default="serverinmem,servergraph",
        description="Comma-separated server names, one per repository backend variant",
    )
    user_id: str = Field(default="garygeeke", min_length=1, description="Caller identity")

    # HTTP
    verify_ssl: bool = Field(
        default=False, description="Verify TLS certificates (platforms ship self-signed ones)"
    )
    request_timeout: float = Field(
        default=30.0, gt=0, le=600, description="HTTP timeout in seconds"
    )
    page_size: int = Field(
        default=100, ge=1, le=1000, description="Page size for repository searches"
    )

    # Data Engine
    external_source_name: str = Field(
        default="DataEngine",
        description="Qualified name of the registered external data engine",
    )

    # Reports
    report_dir: str = Field(
        default="test-results/fvt-reports",
        description="Directory for failure reports",
    )

    # Logging
    log_level: str = Field(
        default="INFO", description="Log level: DEBUG, INFO, WARNING, ERROR"
    )
    log_format: str = Field(default="text", description="Log format: json or text")

    @field_validator("platform_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            raise ValueError(f"log_level must be one of {valid}")
        return upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        lower = v.lower()
        if lower not in {"json", "text"}:
            raise ValueError("log_format must be 'json' or 'text'")
        return lower

    @property
    def server_names(self) -> list[str]:
        return [s.strip() for s in self.servers.split(",") if s.strip()]


@lru_cache
def get_settings() -> Settings:
    """Cached settings factory."""
    return Settings()


settings = get_settings()
