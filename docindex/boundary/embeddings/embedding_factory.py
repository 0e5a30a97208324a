"""
Embedding provider factory.

Depends on EMBEDDING_PROVIDER environment variable.

Dependencies: langchain_core, langchain_google_genai, langchain_aws, docindex.configs
System role: Embedding provider instantiation and selection
"""

import logging

from langchain_core.embeddings import DeterministicFakeEmbedding, Embeddings

from docindex.boundary.embeddings.langchain_provider import LangChainEmbeddingProvider
from docindex.configs.settings import Settings

logger = logging.getLogger(__name__)


def build_langchain_embeddings(settings: Settings) -> Embeddings:
    """
    Build the LangChain embeddings client selected by configuration.

    Args:
        settings: Application settings

    Returns:
        Embeddings: LangChain embeddings client

    Raises:
        ValueError: If EMBEDDING_PROVIDER is invalid
    """
    config = settings.embedding
    provider = config.provider.lower()

    if provider == "google":
        from docindex.boundary.embeddings.embeddings_wrapper import FixedDimensionEmbeddings

        logger.info(f"{__name__}:build_langchain_embeddings - Using Google model {config.model}")
        return FixedDimensionEmbeddings(
            model=config.model,
            output_dimensionality=config.dimension,
        )

    elif provider == "bedrock":
        from langchain_aws import BedrockEmbeddings

        logger.info(f"{__name__}:build_langchain_embeddings - Using Bedrock model {config.model}")
        model_kwargs = None
        if config.model.startswith("amazon.titan-embed-text-v2"):
            model_kwargs = {"dimensions": config.dimension, "normalize": True}
        return BedrockEmbeddings(
            model_id=config.model,
            region_name=config.region,
            model_kwargs=model_kwargs,
        )

    elif provider == "fake":
        logger.warning(
            f"{__name__}:build_langchain_embeddings - Using deterministic fake embeddings"
        )
        return DeterministicFakeEmbedding(size=config.dimension)

    else:
        raise ValueError(
            f"Invalid EMBEDDING_PROVIDER: {provider}. Must be 'google', 'bedrock' or 'fake'."
        )


def get_embedding_provider(
    settings: Settings,
    embeddings: Embeddings | None = None,
) -> LangChainEmbeddingProvider:
    """
    Get the embedding provider for the configured backend.

    Args:
        settings: Application settings
        embeddings: Prebuilt LangChain embeddings to reuse

    Returns:
        LangChainEmbeddingProvider: Provider enforcing the configured dimension
    """
    return LangChainEmbeddingProvider(
        embeddings=embeddings or build_langchain_embeddings(settings),
        dimension=settings.embedding.dimension,
    )
