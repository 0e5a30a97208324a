"""
Test suite for DocumentIndexService.

Tests store, search and delete orchestration against deterministic
collaborators (fake embeddings + in-memory index), plus failure mapping.

System role: Verification of document indexing orchestration layer
"""

import time
from unittest.mock import MagicMock

import pytest

from docindex.application.services import MISSING_TEXT, DocumentIndexService
from docindex.boundary.vdb import IndexMatch, InMemoryIndex
from docindex.configs.service import ServiceSettings
from docindex.core.access_gate import AccessGate
from docindex.core.content_id import identify
from docindex.core.exceptions import (
    EmbeddingError,
    ForbiddenError,
    InvalidArgumentError,
    UpstreamError,
    VectorStoreError,
)


class TestStore:
    """Test suite for DocumentIndexService.store."""

    @pytest.mark.asyncio
    async def test_store_should_return_content_identifier(
        self, document_service: DocumentIndexService
    ) -> None:
        result = await document_service.store("test-doc-1")

        assert result.id == identify("test-doc-1")
        assert result.mutation_id is None

    @pytest.mark.asyncio
    async def test_store_should_upsert_text_payload(
        self,
        document_service: DocumentIndexService,
        index: InMemoryIndex,
        index_spy: MagicMock,
    ) -> None:
        await document_service.store("hello world")

        index_spy.upsert.assert_called_once()
        doc_id, vector, payload = index_spy.upsert.call_args.args
        assert doc_id == identify("hello world")
        assert len(vector) == 32
        assert payload == {"text": "hello world"}
        assert index.get_payload(doc_id) == {"text": "hello world"}

    @pytest.mark.asyncio
    async def test_store_twice_should_keep_one_entry(
        self,
        document_service: DocumentIndexService,
        index: InMemoryIndex,
        index_spy: MagicMock,
    ) -> None:
        first = await document_service.store("hello world")
        second = await document_service.store("hello world")

        assert first.id == second.id
        assert len(index) == 1
        assert index_spy.upsert.call_count == 2

    @pytest.mark.asyncio
    async def test_store_twice_should_overwrite_with_latest_vector(
        self, gate: AccessGate, service_config: ServiceSettings
    ) -> None:
        embedder = MagicMock()
        embedder.embed.side_effect = [[1.0, 0.0], [0.0, 1.0]]
        index = InMemoryIndex()
        service = DocumentIndexService(embedder, index, gate, service_config)

        await service.store("same text")
        await service.store("same text")

        assert len(index) == 1
        [match] = index.query([0.0, 1.0], k=1)
        assert match.score == pytest.approx(1.0)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", None])
    async def test_store_should_reject_empty_text_without_upstream_calls(
        self,
        document_service: DocumentIndexService,
        embedder_spy: MagicMock,
        index_spy: MagicMock,
        text: str | None,
    ) -> None:
        with pytest.raises(InvalidArgumentError):
            await document_service.store(text)

        embedder_spy.embed.assert_not_called()
        index_spy.upsert.assert_not_called()


class TestSearch:
    """Test suite for DocumentIndexService.search."""

    @pytest.mark.asyncio
    async def test_search_should_round_trip_stored_text(
        self, document_service: DocumentIndexService
    ) -> None:
        await document_service.store("hello world")
        await document_service.store("something else entirely")

        results = await document_service.search("hello world", 1)

        assert len(results) == 1
        assert results[0].text == "hello world"
        assert results[0].id == identify("hello world")

    @pytest.mark.asyncio
    async def test_search_should_default_limit_to_five(
        self, document_service: DocumentIndexService, index_spy: MagicMock
    ) -> None:
        await document_service.search("anything")

        _, k = index_spy.query.call_args.args
        assert k == 5

    @pytest.mark.asyncio
    async def test_search_should_cap_limit_at_maximum(
        self, document_service: DocumentIndexService, index_spy: MagicMock
    ) -> None:
        await document_service.search("anything", 10_000)

        _, k = index_spy.query.call_args.args
        assert k == 100

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [0, -3])
    async def test_search_should_reject_limit_below_one(
        self,
        document_service: DocumentIndexService,
        embedder_spy: MagicMock,
        limit: int,
    ) -> None:
        with pytest.raises(InvalidArgumentError):
            await document_service.search("anything", limit)

        embedder_spy.embed.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", ["", None])
    async def test_search_should_reject_empty_query_without_upstream_calls(
        self,
        document_service: DocumentIndexService,
        embedder_spy: MagicMock,
        index_spy: MagicMock,
        query: str | None,
    ) -> None:
        with pytest.raises(InvalidArgumentError):
            await document_service.search(query)

        embedder_spy.embed.assert_not_called()
        index_spy.query.assert_not_called()

    @pytest.mark.asyncio
    async def test_search_should_preserve_index_order(
        self, gate: AccessGate, service_config: ServiceSettings
    ) -> None:
        embedder = MagicMock()
        embedder.embed.return_value = [1.0, 0.0]
        index = MagicMock()
        index.query.return_value = [
            IndexMatch(id="b", payload={"text": "second"}, score=0.1),
            IndexMatch(id="a", payload={"text": "first"}, score=0.9),
        ]
        service = DocumentIndexService(embedder, index, gate, service_config)

        results = await service.search("query")

        assert [result.id for result in results] == ["b", "a"]

    @pytest.mark.asyncio
    async def test_search_should_use_sentinel_for_missing_text(
        self, document_service: DocumentIndexService, index: InMemoryIndex, embedder
    ) -> None:
        index.upsert("orphan", embedder.embed("orphan"), {})

        results = await document_service.search("orphan", 1)

        assert results[0].id == "orphan"
        assert results[0].text == MISSING_TEXT

    @pytest.mark.asyncio
    async def test_search_on_empty_index_should_return_nothing(
        self, document_service: DocumentIndexService
    ) -> None:
        assert await document_service.search("anything") == []


class TestDelete:
    """Test suite for DocumentIndexService.delete."""

    @pytest.mark.asyncio
    async def test_delete_should_remove_entry(
        self, document_service: DocumentIndexService, index: InMemoryIndex
    ) -> None:
        stored = await document_service.store("test-doc-1")

        result = await document_service.delete(stored.id, "test-api-token")

        assert result.id == stored.id
        assert stored.id not in index
        assert await document_service.search("test-doc-1", 1) == []

    @pytest.mark.asyncio
    async def test_delete_with_wrong_token_should_keep_entry(
        self,
        document_service: DocumentIndexService,
        index: InMemoryIndex,
        index_spy: MagicMock,
    ) -> None:
        stored = await document_service.store("test-doc-1")

        with pytest.raises(ForbiddenError):
            await document_service.delete(stored.id, "wrong-token")

        index_spy.delete_by_id.assert_not_called()
        assert stored.id in index

    @pytest.mark.asyncio
    async def test_delete_unknown_id_should_succeed(
        self, document_service: DocumentIndexService
    ) -> None:
        result = await document_service.delete("does-not-exist", "test-api-token")

        assert result.id == "does-not-exist"

    @pytest.mark.asyncio
    async def test_delete_should_check_id_before_token(
        self, document_service: DocumentIndexService, index_spy: MagicMock
    ) -> None:
        with pytest.raises(InvalidArgumentError):
            await document_service.delete("", "wrong-token")

        index_spy.delete_by_id.assert_not_called()


class TestUpstreamFailures:
    """Test suite for collaborator failure mapping."""

    @pytest.mark.asyncio
    async def test_embedding_failure_should_raise_embedding_error(
        self,
        gate: AccessGate,
        service_config: ServiceSettings,
        index: InMemoryIndex,
    ) -> None:
        embedder = MagicMock()
        embedder.embed.side_effect = RuntimeError("model unavailable")
        service = DocumentIndexService(embedder, index, gate, service_config)

        with pytest.raises(EmbeddingError) as exc_info:
            await service.store("hello")

        assert exc_info.value.details["operation"] == "embed"
        assert len(index) == 0

    @pytest.mark.asyncio
    async def test_index_failure_should_raise_vector_store_error(
        self, embedder, gate: AccessGate, service_config: ServiceSettings
    ) -> None:
        index = MagicMock()
        index.upsert.side_effect = ConnectionError("index unreachable")
        service = DocumentIndexService(embedder, index, gate, service_config)

        with pytest.raises(VectorStoreError):
            await service.store("hello")

    @pytest.mark.asyncio
    async def test_upstream_error_from_adapter_should_propagate_unchanged(
        self, embedder, gate: AccessGate, service_config: ServiceSettings
    ) -> None:
        index = MagicMock()
        original = VectorStoreError("delete failed", operation="delete")
        index.delete_by_id.side_effect = original
        service = DocumentIndexService(embedder, index, gate, service_config)

        with pytest.raises(VectorStoreError) as exc_info:
            await service.delete("some-id", "test-api-token")

        assert exc_info.value is original

    @pytest.mark.asyncio
    async def test_slow_upstream_should_time_out(
        self, gate: AccessGate, index: InMemoryIndex
    ) -> None:
        embedder = MagicMock()
        embedder.embed.side_effect = lambda text: time.sleep(0.5) or [1.0]
        service = DocumentIndexService(
            embedder, index, gate, ServiceSettings(upstream_timeout_sec=0.05)
        )

        with pytest.raises(UpstreamError, match="timed out"):
            await service.search("slow")

    @pytest.mark.asyncio
    async def test_timed_out_upsert_may_still_be_applied(
        self, gate: AccessGate, embedder, index: InMemoryIndex
    ) -> None:
        slow_index = MagicMock(wraps=index)
        slow_index.upsert.side_effect = lambda *args: time.sleep(0.2) or index.upsert(*args)
        service = DocumentIndexService(
            embedder, slow_index, gate, ServiceSettings(upstream_timeout_sec=0.05)
        )

        with pytest.raises(VectorStoreError, match="timed out"):
            await service.store("late write")

        # The worker thread keeps running after the caller gives up
        time.sleep(0.4)
        assert identify("late write") in index
