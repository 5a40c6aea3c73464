"""
Settings for the neo-permissions library.

Environment-driven logging configuration, loaded with pydantic settings.
"""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PermissionSettings(BaseSettings):
    """Runtime settings for the library."""

    model_config = SettingsConfigDict(
        env_prefix="NEO_PERMISSIONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="simple")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate log level."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        log_format = v.lower()
        if log_format not in {"simple", "detailed", "json"}:
            raise ValueError(f"Invalid log format: {v}")
        return log_format


@lru_cache()
def get_settings() -> PermissionSettings:
    """Get cached settings instance."""
    return PermissionSettings()
