"""
Chunking Module - Sliding window text chunking for RAG

Quick Start:
    from chunking import TextChunker, ChunkingConfig

    chunker = TextChunker(ChunkingConfig(chunk_size=512, chunk_overlap=50))
    chunks = chunker.chunk("Some long text ...")
"""

__version__ = "1.0.0"

from .chunker import TextChunker, chunk_text
from .config import ChunkingConfig

__all__ = [
    "__version__",
    "TextChunker",
    "ChunkingConfig",
    "chunk_text",
]
