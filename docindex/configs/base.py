"""
Process-wide settings shared by every docindex config module.

Reads ENVIRONMENT, DEBUG and LOG_LEVEL (no prefix) from the environment or a
local .env file.

Dependencies: pydantic_settings
System role: Root of the docindex configuration tree
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Deployment-level settings; nested config sections hang off Settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment stage, reported in the startup log",
    )
    debug: bool = Field(
        default=False,
        description="Expose /docs and /redoc",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level passed to configure_logging",
    )
