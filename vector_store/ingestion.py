"""
Ingestion Pipeline - chunk, deduplicate, embed, append

Algorithm:
1. Chunk the text; nothing to do for blank input (the store is not touched).
2. Load the store (or start an empty one with dimension 0).
3. Skip chunks whose content hash is already stored, without embedding them.
4. Embed the rest in chunk order. The first vector fixes the store dimension;
   any later width mismatch aborts the call before anything is saved.
5. Append one StoredItem per new chunk and save the whole document once.

Usage:
    from vector_store import IngestionPipeline, VectorStore, MemoryBackend
    from providers import MockProvider

    pipeline = IngestionPipeline(VectorStore(MemoryBackend()), MockProvider())
    result = pipeline.ingest("Some text", {"source": "manual"})
    print(result.added, result.skipped)
"""

import hashlib
import json
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic_core import to_jsonable_python

from chunking import TextChunker
from common.exceptions import EmbeddingDimensionMismatch
from providers.base import ModelProvider

from .models import IngestResult, StoredItem
from .store import VectorStore

logger = logging.getLogger(__name__)


def jsonable_metadata(metadata: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """Metadata in the form it takes once saved (dates as ISO strings, unknown types via str)."""
    return to_jsonable_python(dict(metadata or {}), serialize_unknown=True)


def content_hash(text: str, metadata: Optional[dict[str, Any]] = None) -> str:
    """Deterministic digest of a chunk and its metadata."""
    canonical = json.dumps(
        jsonable_metadata(metadata),
        sort_keys=True,
        ensure_ascii=False,
        separators=(",", ":"),
    )
    return hashlib.sha256(f"{text}\n{canonical}".encode("utf-8")).hexdigest()


def new_id() -> str:
    return str(uuid.uuid4())


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class IngestionPipeline:
    def __init__(
        self,
        store: VectorStore,
        provider: ModelProvider,
        chunker: Optional[TextChunker] = None,
    ):
        self.store = store
        self.provider = provider
        self.chunker = chunker or TextChunker()

    def ingest(
        self,
        text: str,
        metadata: Optional[dict[str, Any]] = None,
        chunk_size: Optional[int] = None,
        chunk_overlap: Optional[int] = None,
    ) -> IngestResult:
        """
        Ingest one text with its metadata.

        All-or-nothing per call: if any embedding fails or has the wrong
        width, no item from this call is persisted.

        Raises:
            EmbeddingDimensionMismatch: a vector's width differs from the store's.
            EmbeddingRequestFailed: the provider could not embed a chunk.
            InvalidFormat: the stored document is corrupt.
        """
        chunks = self.chunker.chunk(text, chunk_size, chunk_overlap)
        if not chunks:
            return IngestResult()

        metadata = jsonable_metadata(metadata)

        with self.store.mutation():
            document = self.store.load_or_create()
            seen = {item.content_hash for item in document.items}
            added = 0
            skipped = 0

            for chunk in chunks:
                digest = content_hash(chunk, metadata)
                if digest in seen:
                    skipped += 1
                    continue

                embedding = self.provider.embed(chunk)
                if document.dimension == 0:
                    document.dimension = len(embedding)
                if document.dimension != len(embedding):
                    logger.warning(
                        "Aborting ingestion into %s: dimension %d, got %d",
                        self.store.key, document.dimension, len(embedding),
                    )
                    raise EmbeddingDimensionMismatch(document.dimension, len(embedding))

                document.items.append(
                    StoredItem(
                        id=new_id(),
                        text=chunk,
                        metadata=metadata,
                        embedding=embedding,
                        created_at=utc_timestamp(),
                        content_hash=digest,
                    )
                )
                seen.add(digest)
                added += 1

            if added:
                self.store.save(document)

        logger.info("Ingested into %s: added=%d skipped=%d", self.store.key, added, skipped)
        return IngestResult(added=added, skipped=skipped)
