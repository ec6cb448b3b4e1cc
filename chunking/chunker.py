"""
Text Chunker - Sliding window chunking for the RAG pipeline

Splits raw text into overlapping fixed-size character windows. Each window
is one unit of embedding, deduplication and retrieval.

Algorithm:
1. Trim the input; empty input yields no chunks.
2. Clamp size to >= 1 and overlap to [0, size - 1] so the window always advances.
3. Cut [start, start + size), clipped to the end of the text.
4. Trim each window and drop windows that are pure whitespace.
5. Stop once a window reaches the end; otherwise advance by size - overlap.

Usage:
    from chunking import chunk_text

    chunks = chunk_text(long_text, chunk_size=512, chunk_overlap=50)
"""

from typing import Optional

from .config import ChunkingConfig


def chunk_text(text: str, chunk_size: int, chunk_overlap: int) -> list[str]:
    """
    Split text into trimmed, non-empty overlapping windows.

    Args:
        text: Raw input text.
        chunk_size: Window width in characters (clamped to >= 1).
        chunk_overlap: Characters shared by consecutive windows
                       (clamped to [0, chunk_size - 1]).

    Returns:
        List of chunks in text order. Empty for blank input.
    """
    cleaned = (text or "").strip()
    if not cleaned:
        return []

    size = max(1, int(chunk_size))
    overlap = max(0, min(int(chunk_overlap), size - 1))

    chunks: list[str] = []
    start = 0
    length = len(cleaned)
    while start < length:
        end = min(length, start + size)
        window = cleaned[start:end].strip()
        if window:
            chunks.append(window)
        if end >= length:
            break
        start = end - overlap
    return chunks


class TextChunker:
    """Chunker bound to a default size/overlap."""

    def __init__(self, config: Optional[ChunkingConfig] = None):
        self.config = config or ChunkingConfig()

    def chunk(
        self,
        text: str,
        chunk_size: Optional[int] = None,
        chunk_overlap: Optional[int] = None,
    ) -> list[str]:
        size = self.config.chunk_size if chunk_size is None else chunk_size
        overlap = self.config.chunk_overlap if chunk_overlap is None else chunk_overlap
        return chunk_text(text, size, overlap)
