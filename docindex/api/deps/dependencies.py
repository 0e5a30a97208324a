"""
Dependency injection container.

Factory functions for FastAPI dependencies. Collaborators are built once per
process from Settings and handed to the service as explicit arguments.

Dependencies: fastapi, docindex.configs, docindex.boundary, docindex.application
System role: DI container for service injection
"""

from fastapi import Depends, Header
from langchain_core.embeddings import Embeddings

from docindex.application.services import DocumentIndexService
from docindex.boundary.embeddings import (
    EmbeddingProvider,
    build_langchain_embeddings,
    get_embedding_provider,
)
from docindex.boundary.vdb import SimilarityIndex, get_vector_store
from docindex.configs import Settings, get_settings
from docindex.core.access_gate import AccessGate


class ServiceCache:
    """Container for cached collaborator and service instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._embeddings = None
        self._embedding_provider = None
        self._vector_store = None
        self._access_gate = None
        self._document_service = None

    @property
    def settings(self) -> Settings:
        """Get settings bound to this cache."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def embeddings(self) -> Embeddings:
        """Get cached LangChain embeddings client."""
        if self._embeddings is None:
            self._embeddings = build_langchain_embeddings(self.settings)
        return self._embeddings

    @property
    def embedding_provider(self) -> EmbeddingProvider:
        """Get cached embedding provider."""
        if self._embedding_provider is None:
            self._embedding_provider = get_embedding_provider(self.settings, self.embeddings)
        return self._embedding_provider

    @property
    def vector_store(self) -> SimilarityIndex:
        """Get cached similarity index."""
        if self._vector_store is None:
            embeddings = None
            if self.settings.vector_store.store_type.lower() == "faiss":
                embeddings = self.embeddings
            self._vector_store = get_vector_store(self.settings, embeddings)
        return self._vector_store

    @property
    def access_gate(self) -> AccessGate:
        """Get cached access gate."""
        if self._access_gate is None:
            auth = self.settings.auth
            self._access_gate = AccessGate(
                api_token=auth.token,
                confirm_token=auth.confirm_token,
            )
        return self._access_gate

    @property
    def document_service(self) -> DocumentIndexService:
        """Get cached document index service."""
        if self._document_service is None:
            self._document_service = DocumentIndexService(
                embedder=self.embedding_provider,
                index=self.vector_store,
                gate=self.access_gate,
                config=self.settings.service,
            )
        return self._document_service

    def clear(self) -> None:
        """Clear all cached instances."""
        self._settings = None
        self._embeddings = None
        self._embedding_provider = None
        self._vector_store = None
        self._access_gate = None
        self._document_service = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_access_gate() -> AccessGate:
    """Get the process-wide access gate."""
    return get_service_cache().access_gate


def get_document_service() -> DocumentIndexService:
    """Get the process-wide document index service."""
    return get_service_cache().document_service


async def require_api_token(
    authorization: str | None = Header(default=None),
    gate: AccessGate = Depends(get_access_gate),
) -> None:
    """
    Reject the request unless the Authorization header carries the API secret.

    Raises:
        UnauthorizedError: If the header is missing or does not match
    """
    gate.authorize(authorization)
