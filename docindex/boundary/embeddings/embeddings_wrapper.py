"""
Google Generative AI embeddings pinned to one dimension and one task type.

Stored texts and search queries are embedded by the same call path, so both
sides use the SEMANTIC_SIMILARITY task type and the configured output
dimensionality. The base class does not apply output_dimensionality from the
constructor, so it is forwarded on every call.

Dependencies: langchain_google_genai
System role: Google embedding client for the similarity index
"""

import logging
from typing import List

from langchain_google_genai import GoogleGenerativeAIEmbeddings

logger = logging.getLogger(__name__)

SIMILARITY_TASK_TYPE = "SEMANTIC_SIMILARITY"


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """GoogleGenerativeAIEmbeddings with a fixed output dimensionality."""

    _output_dimensionality: int = 768
    _similarity_task_type: str = SIMILARITY_TASK_TYPE

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = 768,
        similarity_task_type: str = SIMILARITY_TASK_TYPE,
        **kwargs,
    ) -> None:
        super().__init__(model=model, **kwargs)
        self._output_dimensionality = output_dimensionality
        self._similarity_task_type = similarity_task_type
        logger.info(
            f"{__name__}:__init__ - Google embeddings model={model}, "
            f"dimension={output_dimensionality}, task_type={similarity_task_type}"
        )

    def _resolve(self, task_type: str | None, output_dimensionality: int | None) -> dict:
        return {
            "task_type": task_type or self._similarity_task_type,
            "output_dimensionality": output_dimensionality or self._output_dimensionality,
        }

    def embed_documents(
        self,
        texts: List[str],
        *,
        batch_size: int = 100,
        task_type: str | None = None,
        titles: List[str] | None = None,
        output_dimensionality: int | None = None,
    ) -> List[List[float]]:
        return super().embed_documents(
            texts,
            batch_size=batch_size,
            titles=titles,
            **self._resolve(task_type, output_dimensionality),
        )

    def embed_query(
        self,
        text: str,
        task_type: str | None = None,
        title: str | None = None,
        output_dimensionality: int | None = None,
    ) -> List[float]:
        # Queries and documents share one vector space
        return super().embed_query(
            text,
            title=title,
            **self._resolve(task_type, output_dimensionality),
        )
