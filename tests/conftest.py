"""
Shared test fixtures and configuration for entire test suite.

Provides: deterministic embedder, in-memory index, access gate, service and
API client wired with dependency overrides.
Dependencies: pytest, fastapi, langchain_core
System role: Test infrastructure and fixture management
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from langchain_core.embeddings import DeterministicFakeEmbedding

from docindex.api.deps import get_access_gate, get_document_service
from docindex.application.services import DocumentIndexService
from docindex.boundary.embeddings import LangChainEmbeddingProvider
from docindex.boundary.vdb import InMemoryIndex
from docindex.configs.service import ServiceSettings
from docindex.core.access_gate import AccessGate
from docindex.main import create_app

API_TOKEN = "test-api-token"
EMBEDDING_DIMENSION = 32


@pytest.fixture
def gate() -> AccessGate:
    """Access gate sharing one secret for API access and delete confirmation."""
    return AccessGate(api_token=API_TOKEN)


@pytest.fixture
def index() -> InMemoryIndex:
    """Empty in-memory similarity index."""
    return InMemoryIndex()


@pytest.fixture
def embedder() -> LangChainEmbeddingProvider:
    """Deterministic embedder: same text, same vector."""
    return LangChainEmbeddingProvider(
        embeddings=DeterministicFakeEmbedding(size=EMBEDDING_DIMENSION),
        dimension=EMBEDDING_DIMENSION,
    )


@pytest.fixture
def embedder_spy(embedder: LangChainEmbeddingProvider) -> MagicMock:
    """Embedder wrapped in a mock to count calls."""
    return MagicMock(wraps=embedder)


@pytest.fixture
def index_spy(index: InMemoryIndex) -> MagicMock:
    """Index wrapped in a mock to count calls."""
    return MagicMock(wraps=index)


@pytest.fixture
def service_config() -> ServiceSettings:
    """Service limits used by the tests."""
    return ServiceSettings(
        default_search_limit=5,
        max_search_limit=100,
        upstream_timeout_sec=5.0,
    )


@pytest.fixture
def document_service(
    embedder_spy: MagicMock,
    index_spy: MagicMock,
    gate: AccessGate,
    service_config: ServiceSettings,
) -> DocumentIndexService:
    """Service over spied deterministic collaborators."""
    return DocumentIndexService(
        embedder=embedder_spy,
        index=index_spy,
        gate=gate,
        config=service_config,
    )


@pytest.fixture
def client(document_service: DocumentIndexService, gate: AccessGate) -> TestClient:
    """API client with the gate and service replaced by test instances."""
    app = create_app()
    app.dependency_overrides[get_document_service] = lambda: document_service
    app.dependency_overrides[get_access_gate] = lambda: gate
    return TestClient(app)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Headers carrying the valid API secret."""
    return {"Authorization": API_TOKEN}
