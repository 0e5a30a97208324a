"""
Similarity index interface.

Every backend satisfies the same contract:
- upsert(id) replaces any prior entry with the same id
- query(vector, k) returns up to k entries ranked by similarity
- delete_by_id(id) removes an entry if present, no-op otherwise

Dependencies: abc (stdlib)
System role: Port between the indexing service and vector backends
"""

from abc import ABC, abstractmethod
from typing import Any

from docindex.boundary.vdb.vector_schemas import IndexMatch


class SimilarityIndex(ABC):
    """Abstract interface for vector index operations."""

    @abstractmethod
    def upsert(self, id: str, vector: list[float], payload: dict[str, Any]) -> str | None:
        """
        Insert or replace the entry keyed by id.

        Returns:
            str | None: Opaque mutation acknowledgement, if the backend issues one
        """

    @abstractmethod
    def query(self, vector: list[float], k: int) -> list[IndexMatch]:
        """Return up to k entries, most similar first, with payload but no vectors."""

    @abstractmethod
    def delete_by_id(self, id: str) -> str | None:
        """
        Delete the entry keyed by id. Deleting a missing id is not an error.

        Returns:
            str | None: Opaque mutation acknowledgement, if the backend issues one
        """
