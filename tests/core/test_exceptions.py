"""Tests for the exception hierarchy."""

from docindex.core.exceptions import (
    DocIndexException,
    EmbeddingError,
    InvalidArgumentError,
    UpstreamError,
    VectorStoreError,
)


def test_invalid_argument_records_field() -> None:
    error = InvalidArgumentError("Text must not be empty", field="text")

    assert error.details == {"field": "text"}
    assert str(error) == "Text must not be empty | Details: {'field': 'text'}"


def test_upstream_errors_share_base() -> None:
    error = VectorStoreError("boom", operation="upsert")

    assert isinstance(error, UpstreamError)
    assert isinstance(EmbeddingError("boom"), DocIndexException)
    assert error.details["operation"] == "upsert"


def test_str_without_details_is_message() -> None:
    assert str(DocIndexException("plain")) == "plain"
