"""
Shared building blocks: exception hierarchy and logging setup.
"""

from .exceptions import (
    ChatRequestFailed,
    EmbeddingDimensionMismatch,
    EmbeddingRequestFailed,
    InvalidFormat,
    MalformedResponse,
    ProviderError,
    RagError,
    StorageError,
)
from .logging_config import get_logger, setup_logging

__all__ = [
    "RagError",
    "InvalidFormat",
    "EmbeddingDimensionMismatch",
    "StorageError",
    "ProviderError",
    "EmbeddingRequestFailed",
    "ChatRequestFailed",
    "MalformedResponse",
    "setup_logging",
    "get_logger",
]
