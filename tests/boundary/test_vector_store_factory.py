"""
Test suite for the vector store factory.

System role: Verification of index backend selection
"""

from unittest.mock import patch

import pytest

from docindex.boundary.vdb import InMemoryIndex, get_vector_store
from docindex.boundary.vdb.s3_vectors_index import S3VectorsIndex
from docindex.configs import Settings
from docindex.configs.vector_store import VectorStoreSettings


def test_memory_store_type_should_build_in_memory_index() -> None:
    settings = Settings(vector_store=VectorStoreSettings(store_type="memory"))

    assert isinstance(get_vector_store(settings), InMemoryIndex)


def test_s3_store_type_should_build_s3_vectors_index() -> None:
    settings = Settings(
        vector_store=VectorStoreSettings(
            store_type="S3", vectors_bucket="my-bucket", aws_region="eu-west-1"
        )
    )

    with patch("docindex.boundary.vdb.s3_vectors_index.boto3.client") as mock_client:
        store = get_vector_store(settings)

    assert isinstance(store, S3VectorsIndex)
    mock_client.assert_called_once_with("s3vectors", region_name="eu-west-1")


def test_faiss_store_type_should_require_embeddings() -> None:
    settings = Settings(vector_store=VectorStoreSettings(store_type="faiss"))

    with pytest.raises(ValueError, match="requires an embeddings"):
        get_vector_store(settings)


def test_invalid_store_type_should_raise_value_error() -> None:
    settings = Settings(vector_store=VectorStoreSettings(store_type="pinecone"))

    with pytest.raises(ValueError, match="Invalid VECTOR_STORE_STORE_TYPE"):
        get_vector_store(settings)
