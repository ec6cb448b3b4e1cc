"""
Vector Store Module - versioned JSON vector store over pluggable backends

Stores chunks with their embeddings in a single JSON document per store key.
The document lives in a file, a remote key/value service, or memory.

Quick Start:
    from providers import MockProvider
    from vector_store import FileBackend, IngestionPipeline, VectorStore

    store = VectorStore(FileBackend("data"), "vector_store.json")
    pipeline = IngestionPipeline(store, MockProvider())
    result = pipeline.ingest("Watermelon is a summer fruit.", {"topic": "watermelon"})
"""

__version__ = "1.0.0"

from .backends import (
    FileBackend,
    HttpBackend,
    MemoryBackend,
    StorageBackend,
    create_backend,
)
from .ingestion import IngestionPipeline, content_hash
from .models import IngestResult, StoredItem, VectorStoreDocument
from .store import VectorStore

__all__ = [
    "__version__",
    "StorageBackend",
    "FileBackend",
    "HttpBackend",
    "MemoryBackend",
    "create_backend",
    "VectorStore",
    "VectorStoreDocument",
    "StoredItem",
    "IngestResult",
    "IngestionPipeline",
    "content_hash",
]
