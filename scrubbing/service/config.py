# scrubbing/service/config.py

"""Application configuration using Pydantic Settings.

Manages environment variables, defaults, and validation rules.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global engine defaults.

    Loads values from environment variables (prefix 'SCRUB_') or .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCRUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Matching
    timeout_seconds: float = Field(
        default=1.0,
        gt=0.0,
        description="Seconds a single pattern search may run before aborting.",
    )

    ignore_case: bool = Field(
        default=False,
        description="Whether new engines start with case-insensitive matching.",
    )

    # Compiled pattern cache
    cache_size: int = Field(
        default=16,
        ge=0,
        description="Number of compiled patterns kept in the process-wide cache.",
    )

    log_level: str = Field(default="INFO", description="Root logging level.")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the level is one logging understands."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


# Singleton settings instance
settings = Settings()
