"""
Embedding provider configuration settings.

Selects the embedding backend and pins the output dimensionality so vectors
always match the similarity index definition.

Dependencies: pydantic, pydantic_settings
System role: Embedding configuration for document indexing
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmbeddingSettings(BaseSettings):
    """Embedding backend configuration (google for prod, fake for local dev)."""

    model_config = SettingsConfigDict(
        env_prefix="EMBEDDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    provider: str = Field(
        default="google",
        description="Embedding provider: 'google', 'bedrock' or 'fake'",
    )
    model: str = Field(
        default="models/gemini-embedding-001",
        description="Embedding model ID for the selected provider",
    )
    dimension: int = Field(
        default=768,
        description="Embedding vector dimension (must match the index dimension)",
        ge=1,
    )
    region: str = Field(
        default="us-east-1",
        description="AWS region for Bedrock embeddings",
    )
