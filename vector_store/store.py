"""
Vector Store - versioned JSON document behind a storage backend

Manages the single document stored under one key:
- Load: read and validate the whole document (InvalidFormat on bad shape)
- Save: serialize and overwrite the whole document
- Delete: drop the document (used to reset before a bulk re-load)

Design:
- Whole-document reads and writes, never row-level
- Mutations on the same (backend location, key) are serialized through a
  process-wide re-entrant lock, so concurrent load-modify-save cycles in one
  process cannot drop each other's items
- Cross-process writers against a shared remote backend are not coordinated

Usage:
    from vector_store import VectorStore, MemoryBackend

    store = VectorStore(MemoryBackend(), "vector_store.json")
    with store.mutation():
        document = store.load_or_create()
        ...
        store.save(document)
"""

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from .backends import StorageBackend
from .models import VectorStoreDocument

logger = logging.getLogger(__name__)


_LOCKS: dict[tuple[str, str], threading.RLock] = {}
_LOCKS_GUARD = threading.Lock()


def _lock_for(location: str, key: str) -> threading.RLock:
    with _LOCKS_GUARD:
        lock = _LOCKS.get((location, key))
        if lock is None:
            lock = threading.RLock()
            _LOCKS[(location, key)] = lock
        return lock


class VectorStore:
    """One versioned vector store document addressed by a store key."""

    def __init__(self, backend: StorageBackend, key: str = "vector_store.json"):
        self.backend = backend
        self.key = key
        self._lock = _lock_for(backend.location, key)

    @contextmanager
    def mutation(self) -> Iterator[None]:
        """Hold the per-key write lock for a load-modify-save sequence."""
        with self._lock:
            yield

    def load(self) -> Optional[VectorStoreDocument]:
        """Return the stored document, or None if nothing was stored yet."""
        raw = self.backend.get(self.key)
        if raw is None:
            return None
        document = VectorStoreDocument.from_json(raw, key=self.key)
        logger.debug(
            "Loaded %s: %d items, dimension %d",
            self.key, len(document.items), document.dimension,
        )
        return document

    def load_or_create(self) -> VectorStoreDocument:
        document = self.load()
        return document if document is not None else VectorStoreDocument()

    def save(self, document: VectorStoreDocument) -> None:
        with self._lock:
            self.backend.put(self.key, document.to_json())
        logger.debug("Saved %s: %d items", self.key, len(document.items))

    def delete(self) -> None:
        with self._lock:
            self.backend.delete(self.key)
        logger.info("Deleted vector store %s", self.key)

    def count(self) -> int:
        document = self.load()
        return len(document.items) if document else 0
