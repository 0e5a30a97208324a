"""
Vector store configuration settings.

Manages the similarity index backend: S3 Vectors in production, a local FAISS
index or an in-process map for development.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for document indexing
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (S3 Vectors for prod, FAISS/memory for dev)."""

    model_config = SettingsConfigDict(
        env_prefix="VECTOR_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = Field(
        default="s3",
        description="Vector store type: 's3' (production), 'faiss' or 'memory' (local dev)",
    )
    vectors_bucket: str = Field(
        default="docindex-vectors",
        description="S3 Vectors bucket name",
    )
    index_name: str = Field(default="documents", description="Vector index name")
    aws_region: str = Field(default="us-east-1", description="AWS region for S3 Vectors")
    persist_directory: str = Field(
        default=".faiss_index",
        description="Directory for the local FAISS index",
    )
