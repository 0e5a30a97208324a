"""
Document service configuration settings.

Search limits, upstream call timeout and CORS origins for the HTTP surface.

Dependencies: pydantic, pydantic_settings
System role: Runtime limits for the document indexing service
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceSettings(BaseSettings):
    """Runtime limits for store/search/delete."""

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_search_limit: int = Field(
        default=5,
        description="Number of results returned when a search omits limit",
        ge=1,
    )
    max_search_limit: int = Field(
        default=100,
        description="Upper bound applied to the requested search limit",
        ge=1,
    )
    upstream_timeout_sec: float = Field(
        default=30.0,
        description="Timeout for each embedding or vector index call",
        gt=0,
    )
    cors_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed by the CORS middleware",
    )
