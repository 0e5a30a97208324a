"""
Embedding boundary layer.

Dependencies: langchain_core, langchain_google_genai, langchain_aws
System role: Embedding adapters for document indexing
"""

from docindex.boundary.embeddings.base import EmbeddingProvider
from docindex.boundary.embeddings.embedding_factory import (
    build_langchain_embeddings,
    get_embedding_provider,
)
from docindex.boundary.embeddings.langchain_provider import LangChainEmbeddingProvider

__all__ = [
    "EmbeddingProvider",
    "LangChainEmbeddingProvider",
    "build_langchain_embeddings",
    "get_embedding_provider",
]
