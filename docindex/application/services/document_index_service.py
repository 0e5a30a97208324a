"""
Document indexing service.

Orchestrates content identification, embedding and the similarity index to
implement store, search and delete. Holds no state between calls; all
durable state lives in the index.

Collaborator clients are synchronous. Each call runs in a worker thread under
a timeout, and the embedding call always completes before the index call that
uses its vector. Failures are not retried.

A timeout abandons the worker thread but cannot cancel it, so a timed-out
upsert or delete may still be applied after the caller receives an error.
Both are idempotent per identifier, so a client retry converges.

Dependencies: docindex.boundary, docindex.core
System role: Document indexing orchestration layer
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from docindex.boundary.embeddings.base import EmbeddingProvider
from docindex.boundary.vdb.base import SimilarityIndex
from docindex.configs.service import ServiceSettings
from docindex.core.access_gate import AccessGate
from docindex.core.content_id import identify
from docindex.core.exceptions import (
    EmbeddingError,
    InvalidArgumentError,
    UpstreamError,
    VectorStoreError,
)
from docindex.models.document import DeleteResult, SearchResult, StoreResult
from docindex.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Text reported for a match whose payload lost its text.
MISSING_TEXT = "Not found"


class DocumentIndexService:
    """
    Store/search/delete over a content-addressed similarity index.

    Storing the same text twice upserts one entry keyed by identify(text).
    """

    def __init__(
        self,
        embedder: EmbeddingProvider,
        index: SimilarityIndex,
        gate: AccessGate,
        config: ServiceSettings | None = None,
    ) -> None:
        """
        Initialize document index service.

        Args:
            embedder: Embedding provider for texts and queries
            index: Similarity index holding stored entries
            gate: Access gate used to confirm destructive operations
            config: Search limits and upstream timeout
        """
        self.embedder = embedder
        self.index = index
        self.gate = gate
        self.config = config or ServiceSettings()

    async def _call_upstream(
        self,
        operation: str,
        error_cls: type[UpstreamError],
        func: Callable[..., T],
        *args: Any,
    ) -> T:
        """Run one collaborator call in a thread, mapping failures to UpstreamError."""
        timeout = self.config.upstream_timeout_sec
        try:
            return await asyncio.wait_for(asyncio.to_thread(func, *args), timeout=timeout)
        except TimeoutError as e:
            logger.error(
                f"{__name__}:_call_upstream - {operation} timed out",
                extra={"operation": operation, "timeout_sec": timeout},
            )
            raise error_cls(
                message=f"Upstream {operation} timed out",
                operation=operation,
                details={"timeout_sec": timeout},
            ) from e
        except UpstreamError as e:
            log_exception_with_context(
                logger, f"Upstream {operation} failed", e, operation=operation
            )
            raise
        except Exception as e:
            log_exception_with_context(
                logger, f"Upstream {operation} failed", e, operation=operation
            )
            raise error_cls(
                message=f"Upstream {operation} failed",
                operation=operation,
                details={"error": str(e)},
            ) from e

    async def store(self, text: str | None) -> StoreResult:
        """
        Store text under its content identifier.

        Flow:
        1. Validate text is non-empty
        2. Compute id = identify(text)
        3. Embed text
        4. Upsert (id, vector, {"text": text})

        Args:
            text: Text to store

        Returns:
            StoreResult: Identifier plus index acknowledgement

        Raises:
            InvalidArgumentError: If text is missing or empty
            UpstreamError: If embedding or upsert fails
        """
        if not text:
            raise InvalidArgumentError("Text must not be empty", field="text")

        doc_id = identify(text)
        vector = await self._call_upstream("embed", EmbeddingError, self.embedder.embed, text)
        mutation_id = await self._call_upstream(
            "upsert", VectorStoreError, self.index.upsert, doc_id, vector, {"text": text}
        )

        log_with_context(
            logger,
            logging.INFO,
            "Stored document",
            doc_id=doc_id,
            text_length=len(text),
            mutation_id=mutation_id,
        )
        return StoreResult(id=doc_id, mutation_id=mutation_id)

    async def search(self, query: str | None, limit: int | None = None) -> list[SearchResult]:
        """
        Search stored text by semantic similarity.

        Results keep the order returned by the index. Stored vectors are never
        part of the result.

        Args:
            query: Query text
            limit: Maximum results (default from config, capped at the configured maximum)

        Returns:
            list[SearchResult]: Matches, most similar first

        Raises:
            InvalidArgumentError: If query is empty or limit is below 1
            UpstreamError: If embedding or query fails
        """
        if not query:
            raise InvalidArgumentError("Query must not be empty", field="query")

        if limit is None:
            limit = self.config.default_search_limit
        if limit < 1:
            raise InvalidArgumentError("Limit must be at least 1", field="limit")
        top_k = min(limit, self.config.max_search_limit)

        vector = await self._call_upstream("embed", EmbeddingError, self.embedder.embed, query)
        matches = await self._call_upstream(
            "query", VectorStoreError, self.index.query, vector, top_k
        )

        results = []
        for match in matches:
            text = match.payload.get("text")
            if not isinstance(text, str):
                logger.warning(
                    "Matched entry has no stored text",
                    extra={"doc_id": match.id},
                )
                text = MISSING_TEXT
            results.append(SearchResult(id=match.id, text=text, score=match.score))

        log_with_context(
            logger,
            logging.INFO,
            "Search completed",
            query_preview=query[:50],
            top_k=top_k,
            result_count=len(results),
        )
        return results

    async def delete(self, doc_id: str | None, confirm_token: str | None) -> DeleteResult:
        """
        Delete a stored entry by identifier.

        Deleting an identifier that is not stored succeeds.

        Args:
            doc_id: Identifier returned by store
            confirm_token: Confirmation secret for destructive operations

        Returns:
            DeleteResult: Identifier plus index acknowledgement

        Raises:
            InvalidArgumentError: If doc_id is missing or empty
            ForbiddenError: If confirm_token does not match
            UpstreamError: If the index delete fails
        """
        if not doc_id:
            raise InvalidArgumentError("ID must not be empty", field="id")
        self.gate.confirm(confirm_token)

        mutation_id = await self._call_upstream(
            "delete", VectorStoreError, self.index.delete_by_id, doc_id
        )

        log_with_context(
            logger, logging.INFO, "Deleted document", doc_id=doc_id, mutation_id=mutation_id
        )
        return DeleteResult(id=doc_id, mutation_id=mutation_id)
