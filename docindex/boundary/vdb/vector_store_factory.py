"""
Vector store factory for selecting the similarity index backend.

Depends on VECTOR_STORE_STORE_TYPE environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: docindex.boundary.vdb, docindex.configs
System role: Vector store instantiation and selection
"""

import logging

from langchain_core.embeddings import Embeddings

from docindex.boundary.vdb.base import SimilarityIndex
from docindex.configs.settings import Settings

logger = logging.getLogger(__name__)


def get_vector_store(settings: Settings, embeddings: Embeddings | None = None) -> SimilarityIndex:
    """
    Factory function to get vector store based on configuration.

    Args:
        settings: Application settings
        embeddings: LangChain embeddings, required by the FAISS backend

    Returns:
        SimilarityIndex: Configured index instance

    Raises:
        ValueError: If the store type is invalid
    """
    config = settings.vector_store
    store_type = config.store_type.lower()

    if store_type == "s3":
        from docindex.boundary.vdb.s3_vectors_index import S3VectorsIndex

        logger.info(f"{__name__}:get_vector_store - Creating S3 Vectors index (production mode)")
        return S3VectorsIndex(
            vectors_bucket=config.vectors_bucket,
            index_name=config.index_name,
            region=config.aws_region,
        )

    elif store_type == "faiss":
        if embeddings is None:
            raise ValueError("FAISS vector store requires an embeddings instance")
        from docindex.boundary.vdb.faiss_index import FaissIndex

        logger.info(f"{__name__}:get_vector_store - Creating FAISS index (local dev mode)")
        return FaissIndex(
            embeddings=embeddings,
            dimension=settings.embedding.dimension,
            persist_directory=config.persist_directory,
            index_name=config.index_name,
        )

    elif store_type == "memory":
        from docindex.boundary.vdb.in_memory_index import InMemoryIndex

        logger.info(f"{__name__}:get_vector_store - Creating in-memory index (non-persistent)")
        return InMemoryIndex()

    else:
        raise ValueError(
            f"Invalid VECTOR_STORE_STORE_TYPE: {store_type}. "
            f"Must be 's3', 'faiss' or 'memory'."
        )
