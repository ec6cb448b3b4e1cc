"""
Tests for the RAG engine exceptions.
"""

import pytest

from common.exceptions import (
    ChatRequestFailed,
    EmbeddingDimensionMismatch,
    EmbeddingRequestFailed,
    InvalidFormat,
    MalformedResponse,
    ProviderError,
    RagError,
    StorageError,
)


class TestRagError:
    """Tests for base RagError."""

    def test_create_simple(self):
        error = RagError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.details is None

    def test_create_with_details(self):
        error = RagError("Error occurred", details="More info here")
        assert str(error) == "Error occurred | Details: More info here"
        assert error.details == "More info here"


class TestStoreErrors:
    def test_invalid_format(self):
        error = InvalidFormat("vector_store.json", "items is not a list")
        assert error.key == "vector_store.json"
        assert error.reason == "items is not a list"
        assert "vector_store.json" in str(error)
        assert "items is not a list" in str(error)

    def test_dimension_mismatch(self):
        error = EmbeddingDimensionMismatch(256, 1024)
        assert error.store == 256
        assert error.got == 1024
        assert str(error) == "Embedding dimension mismatch: store=256, got=1024"

    def test_storage_error_with_status(self):
        error = StorageError("k.json", "put", status=503, details="unavailable")
        assert error.status == 503
        assert error.operation == "put"
        assert "HTTP 503" in str(error)


class TestProviderErrors:
    def test_embedding_failed_with_status(self):
        error = EmbeddingRequestFailed(401, details="bad key")
        assert error.status == 401
        assert str(error).startswith("Embeddings request failed: 401")

    def test_embedding_failed_without_status(self):
        error = EmbeddingRequestFailed()
        assert error.status is None
        assert str(error) == "Embeddings request failed"

    def test_chat_failed(self):
        error = ChatRequestFailed(500)
        assert str(error) == "Chat request failed: 500"

    def test_malformed_response_truncates_content(self):
        error = MalformedResponse(response_content="x" * 1000)
        assert error.details == "x" * 500
        assert error.status is None

    @pytest.mark.parametrize(
        "error",
        [
            EmbeddingRequestFailed(),
            ChatRequestFailed(),
            MalformedResponse(),
        ],
    )
    def test_provider_errors_share_base(self, error):
        assert isinstance(error, ProviderError)
        assert isinstance(error, RagError)

    def test_store_errors_are_rag_errors(self):
        assert issubclass(InvalidFormat, RagError)
        assert issubclass(EmbeddingDimensionMismatch, RagError)
        assert issubclass(StorageError, RagError)
        assert not issubclass(StorageError, ProviderError)
