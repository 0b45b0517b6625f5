"""Environment-aware configuration with validation.

This module provides centralized configuration management using Pydantic Settings.
All environment variables are validated at startup to fail fast on misconfigurations.
"""

import json
from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_CONTENT_TYPES = [
    "application/dash+xml",
    "application/xml",
    "text/xml",
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every setting has a default, so the CLI runs without any environment.
    Settings are cached to avoid repeated parsing.

    Example:
        >>> settings = get_settings()
        >>> print(settings.max_manifest_size_bytes)
        10485760
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Fetch
    fetch_timeout_seconds: float = Field(
        default=30.0,
        gt=0.0,
        le=300.0,
        alias="FETCH_TIMEOUT_SECONDS",
        description="Timeout for retrieving a remote manifest",
    )
    max_manifest_size_mb: int = Field(
        default=10,
        ge=1,
        le=100,
        alias="MAX_MANIFEST_SIZE_MB",
        description="Maximum accepted manifest size in MiB",
    )
    allowed_content_types: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_CONTENT_TYPES),
        alias="ALLOWED_CONTENT_TYPES",
        description="Response media types accepted as manifests",
    )
    user_agent: str = Field(
        default="DashSummary/1.0 (Python urllib)",
        min_length=1,
        alias="USER_AGENT",
        description="User-Agent header sent with manifest requests",
    )

    # Output
    json_indent: int = Field(
        default=4,
        ge=0,
        le=8,
        alias="JSON_INDENT",
        description="Indentation used for JSON output",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Logging level",
    )

    @field_validator("allowed_content_types", mode="before")
    @classmethod
    def split_content_types(cls, v):
        """Accept a comma-separated string or a JSON array from the environment."""
        if isinstance(v, str):
            if v.lstrip().startswith("["):
                return json.loads(v)
            return v.split(",")
        return v

    @field_validator("allowed_content_types", mode="after")
    @classmethod
    def normalize_content_types(cls, v: list[str]) -> list[str]:
        """Lower-case media types so matching is case-insensitive."""
        normalized = [item.strip().lower() for item in v if item.strip()]
        if not normalized:
            raise ValueError("At least one allowed content type is required")
        return normalized

    @property
    def max_manifest_size_bytes(self) -> int:
        """Get max manifest size in bytes."""
        return self.max_manifest_size_mb * 1024 * 1024


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached for the lifetime of the process.

    Returns:
        Validated Settings instance

    Raises:
        ValidationError: If environment variables are invalid
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Useful for testing when environment variables change.
    """
    get_settings.cache_clear()
