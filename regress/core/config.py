"""Harness configuration using Pydantic Settings.

Environment variables are loaded with the REGRESS_ prefix, optionally from
a local .env file. Command-line flags override individual values by
re-validating the merged values with Settings.model_validate().
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from regress.core.constants import (
    DEFAULT_CACHE_DIR,
    DEFAULT_SPEC_PATH,
    FILE_PLACEHOLDER,
    VERSION,
)


class Settings(BaseSettings):
    """Harness settings loaded from environment variables.

    Pattern: Pydantic Settings with Environment Variables
    """

    # Inputs
    spec_path: str = Field(
        default=DEFAULT_SPEC_PATH,
        description="Path of the test-spec file"
    )
    cache_dir: str = Field(
        default=DEFAULT_CACHE_DIR,
        description="Directory holding downloaded test files named by SHA-1"
    )

    # Execution
    file_placeholder: str = Field(
        default=FILE_PLACEHOLDER,
        min_length=1,
        description="Argument token replaced with the local test file path"
    )
    normalize_whitespace: bool = Field(
        default=False,
        description="Collapse whitespace runs before comparing output"
    )

    # Timeouts (None blocks indefinitely)
    http_timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Download timeout"
    )
    command_timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Timeout for each command under test"
    )

    # HTTP
    user_agent: str = Field(
        default=f"regress/{VERSION}",
        description="User-Agent header sent with downloads"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="structlog renderer"
    )

    model_config = SettingsConfigDict(
        env_prefix="REGRESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Harness settings singleton
    """
    return Settings()
