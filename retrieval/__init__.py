"""
Retrieval component for RAG pipelines.

Hybrid retrieval over the vector store: cosine similarity and keyword
overlap are ranked separately, merged, weighted, filtered and truncated.
"""

__version__ = "1.0.0"

from .config import RetrievalConfig
from .hybrid import hybrid_merge
from .keywords import extract_keywords, keyword_score
from .models import RetrievalDocument
from .service import RetrievalService
from .similarity import cosine_similarity

__all__ = [
    "__version__",
    "RetrievalConfig",
    "RetrievalService",
    "RetrievalDocument",
    "hybrid_merge",
    "cosine_similarity",
    "extract_keywords",
    "keyword_score",
]
