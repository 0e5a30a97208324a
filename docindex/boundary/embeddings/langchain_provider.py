"""
LangChain embeddings adapter.

Adapts any LangChain Embeddings implementation (Gemini, Bedrock, fake) to the
EmbeddingProvider interface and enforces the configured dimension.

Dependencies: langchain_core
System role: Embedding generation adapter
"""

import logging

from langchain_core.embeddings import Embeddings

from docindex.boundary.embeddings.base import EmbeddingProvider
from docindex.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


class LangChainEmbeddingProvider(EmbeddingProvider):
    """EmbeddingProvider backed by a LangChain Embeddings object."""

    def __init__(self, embeddings: Embeddings, dimension: int) -> None:
        """
        Initialize adapter.

        Args:
            embeddings: LangChain embeddings client
            dimension: Expected vector dimension (must match the index)
        """
        self.embeddings = embeddings
        self._dimension = dimension

    @property
    def dimension(self) -> int:
        return self._dimension

    def embed(self, text: str) -> list[float]:
        """
        Generate embedding for text.

        Args:
            text: Text to embed

        Returns:
            list[float]: Embedding vector

        Raises:
            EmbeddingError: If the model returns a vector of the wrong size
        """
        vector = [float(value) for value in self.embeddings.embed_query(text)]
        if len(vector) != self._dimension:
            raise EmbeddingError(
                message="Embedding dimension does not match the index dimension",
                operation="embed",
                details={"expected": self._dimension, "actual": len(vector)},
            )
        return vector
