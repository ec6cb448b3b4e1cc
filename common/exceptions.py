"""
Custom Exceptions for the RAG engine.

Exception Hierarchy:
    RagError (base)
    ├── InvalidFormat
    ├── EmbeddingDimensionMismatch
    ├── StorageError
    └── ProviderError
        ├── EmbeddingRequestFailed
        ├── ChatRequestFailed
        └── MalformedResponse

None of these are retried inside the engine. Callers decide whether to
retry, rebuild the store, or surface the failure.

Usage:
    from common.exceptions import EmbeddingDimensionMismatch, RagError

    try:
        client.query("watermelon")
    except EmbeddingDimensionMismatch as e:
        print(f"Store has {e.store} dims, provider returned {e.got}")
    except RagError as e:
        print(f"Query failed: {e}")
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# BASE EXCEPTION
# =============================================================================


class RagError(Exception):
    """
    Base exception for all RAG engine errors.

    Attributes:
        message: Human-readable error description
        details: Additional technical details (optional)
    """

    def __init__(
        self,
        message: str = "A RAG engine error occurred",
        details: Optional[str] = None,
    ):
        self.message = message
        self.details = details

        full_message = message
        if details:
            full_message = f"{message} | Details: {details}"

        super().__init__(full_message)


# =============================================================================
# STORE ERRORS
# =============================================================================


class InvalidFormat(RagError):
    """
    Raised when a persisted vector store fails version/shape validation.

    The store is treated as corrupt; it is never silently discarded.

    Attributes:
        key: Store key that failed to load
        reason: What was wrong with the document
    """

    def __init__(self, key: str, reason: Optional[str] = None):
        self.key = key
        self.reason = reason
        super().__init__(
            message=f"Invalid vector store format: {key}",
            details=reason,
        )


class EmbeddingDimensionMismatch(RagError):
    """
    Raised when an embedding's width disagrees with the store dimension.

    Attributes:
        store: Dimension established by the store
        got: Dimension of the freshly computed embedding
    """

    def __init__(self, store: int, got: int):
        self.store = store
        self.got = got
        super().__init__(
            message=f"Embedding dimension mismatch: store={store}, got={got}",
        )


class StorageError(RagError):
    """
    Raised when a storage backend cannot complete an operation.

    Attributes:
        key: Store key involved
        operation: get, put or delete
        status: HTTP status code for remote backends (if available)
    """

    def __init__(
        self,
        key: str,
        operation: str,
        status: Optional[int] = None,
        details: Optional[str] = None,
    ):
        self.key = key
        self.operation = operation
        self.status = status
        message = f"store {operation} failed for {key}"
        if status is not None:
            message = f"{message} (HTTP {status})"
        super().__init__(message, details)


# =============================================================================
# PROVIDER ERRORS
# =============================================================================


class ProviderError(RagError):
    """
    Base class for embedding/chat provider errors.

    Attributes:
        status: HTTP status code if available
    """

    def __init__(
        self,
        message: str = "Provider error",
        status: Optional[int] = None,
        details: Optional[str] = None,
    ):
        self.status = status
        if status is not None:
            message = f"{message}: {status}"
        super().__init__(message, details)


class EmbeddingRequestFailed(ProviderError):
    """Raised on a failed embedding call or a response without a vector."""

    def __init__(self, status: Optional[int] = None, details: Optional[str] = None):
        super().__init__("Embeddings request failed", status, details)


class ChatRequestFailed(ProviderError):
    """Raised when the chat-completion endpoint returns a failure."""

    def __init__(self, status: Optional[int] = None, details: Optional[str] = None):
        super().__init__("Chat request failed", status, details)


class MalformedResponse(ProviderError):
    """
    Raised when the provider succeeds but the body is unusable.

    Attributes:
        response_content: Raw response content if available
    """

    def __init__(
        self,
        message: str = "Chat response missing message content",
        response_content: Optional[str] = None,
    ):
        self.response_content = response_content
        super().__init__(message)
        if response_content:
            self.details = response_content[:500]
