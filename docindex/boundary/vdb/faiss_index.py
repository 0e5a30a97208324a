"""
FAISS similarity index for local development.

Wraps LangChain FAISS with a flat L2 index over L2-normalized vectors, so
squared distance d maps to cosine similarity 1 - d / 2.
Persists to disk after every mutation.

Dependencies: faiss-cpu, langchain_community, langchain_core
System role: Local vector store for development
"""

import logging
import threading
from pathlib import Path
from typing import Any

import faiss
from langchain_community.docstore.in_memory import InMemoryDocstore
from langchain_community.vectorstores import FAISS
from langchain_core.embeddings import Embeddings

from docindex.boundary.vdb.base import SimilarityIndex
from docindex.boundary.vdb.vector_schemas import IndexMatch

logger = logging.getLogger(__name__)

_FAISS_OPTIONS = {"normalize_L2": True}


class FaissIndex(SimilarityIndex):
    """
    FAISS vector store for local development.

    The LangChain wrapper needs an Embeddings object for load_local; vectors
    are always supplied precomputed, so it is never called to embed.
    """

    def __init__(
        self,
        embeddings: Embeddings,
        dimension: int,
        persist_directory: str = ".faiss_index",
        index_name: str = "documents",
    ) -> None:
        """
        Initialize FAISS index, loading a persisted one if present.

        Args:
            embeddings: LangChain embeddings bound to the wrapper
            dimension: Vector dimension for a new index
            persist_directory: Directory for index persistence
            index_name: File stem of the persisted index
        """
        self._persist_dir = Path(persist_directory)
        self._persist_dir.mkdir(parents=True, exist_ok=True)
        self._index_name = index_name
        self._embeddings = embeddings
        self._dimension = dimension
        self._lock = threading.Lock()
        self._store = self._load_or_create_index()

    def _load_or_create_index(self) -> FAISS:
        """Load existing index or create empty one."""
        index_path = self._persist_dir / f"{self._index_name}.faiss"
        if index_path.exists():
            logger.info(f"{__name__}:_load_or_create_index - Loading index from {index_path}")
            return FAISS.load_local(
                str(self._persist_dir),
                self._embeddings,
                index_name=self._index_name,
                allow_dangerous_deserialization=True,
                **_FAISS_OPTIONS,
            )

        logger.info(
            f"{__name__}:_load_or_create_index - Creating new FAISS index "
            f"with dimension={self._dimension}"
        )
        return FAISS(
            embedding_function=self._embeddings,
            index=faiss.IndexFlatL2(self._dimension),
            docstore=InMemoryDocstore(),
            index_to_docstore_id={},
            **_FAISS_OPTIONS,
        )

    def _contains(self, id: str) -> bool:
        return id in self._store.index_to_docstore_id.values()

    def _save(self) -> None:
        self._store.save_local(str(self._persist_dir), index_name=self._index_name)

    def upsert(self, id: str, vector: list[float], payload: dict[str, Any]) -> str | None:
        with self._lock:
            if self._contains(id):
                self._store.delete([id])
            self._store.add_embeddings(
                [(payload.get("text", ""), list(vector))],
                metadatas=[dict(payload)],
                ids=[id],
            )
            self._save()
        return None

    def query(self, vector: list[float], k: int) -> list[IndexMatch]:
        with self._lock:
            results = self._store.similarity_search_with_score_by_vector(list(vector), k=k)

        return [
            IndexMatch(id=doc.id, payload=dict(doc.metadata), score=1.0 - float(score) / 2)
            for doc, score in results
        ]

    def delete_by_id(self, id: str) -> str | None:
        with self._lock:
            if self._contains(id):
                self._store.delete([id])
                self._save()
        return None
