"""
In-process similarity index.

Cosine similarity over a dict of normalized vectors. Used for tests and
local development without external services.

Dependencies: numpy
System role: Deterministic vector index for local runs
"""

import threading
from typing import Any

import numpy as np

from docindex.boundary.vdb.base import SimilarityIndex
from docindex.boundary.vdb.vector_schemas import IndexMatch


class InMemoryIndex(SimilarityIndex):
    """Simple in-memory SimilarityIndex using cosine similarity."""

    def __init__(self) -> None:
        self._entries: dict[str, tuple[np.ndarray, dict[str, Any]]] = {}
        # Methods run in worker threads under the service.
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, id: object) -> bool:
        with self._lock:
            return id in self._entries

    def get_payload(self, id: str) -> dict[str, Any] | None:
        """Return the stored payload for id, or None."""
        with self._lock:
            entry = self._entries.get(id)
        return dict(entry[1]) if entry else None

    def upsert(self, id: str, vector: list[float], payload: dict[str, Any]) -> str | None:
        array = np.asarray(vector, dtype=np.float32)
        norm = np.linalg.norm(array)
        if norm > 0:
            array = array / norm
        with self._lock:
            self._entries[id] = (array, dict(payload))
        return None

    def query(self, vector: list[float], k: int) -> list[IndexMatch]:
        query = np.asarray(vector, dtype=np.float32)
        norm = np.linalg.norm(query)
        if norm == 0 or k < 1:
            return []
        query = query / norm

        with self._lock:
            scored = [
                (float(np.dot(query, stored)), id, payload)
                for id, (stored, payload) in self._entries.items()
            ]

        scored.sort(key=lambda item: item[0], reverse=True)
        return [
            IndexMatch(id=id, payload=dict(payload), score=score)
            for score, id, payload in scored[:k]
        ]

    def delete_by_id(self, id: str) -> str | None:
        with self._lock:
            self._entries.pop(id, None)
        return None

    def clear(self) -> None:
        """Remove all entries."""
        with self._lock:
            self._entries.clear()
