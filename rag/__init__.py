"""
RAG facade: configuration, client, HTTP service and CLI.

Quick Start:
    from rag import RagClient, RagConfig

    client = RagClient(RagConfig.from_env())
    client.ingest_text("Watermelon is a summer fruit.", {"topic": "watermelon"})
    result = client.query("watermelon", answerMode="none")
"""

__version__ = "1.0.0"

from .client import RagClient
from .config import RagConfig, default_store_key
from .models import QueryRequest, QueryResult, UsedConfig, normalize_records

__all__ = [
    "__version__",
    "RagClient",
    "RagConfig",
    "QueryRequest",
    "QueryResult",
    "UsedConfig",
    "default_store_key",
    "normalize_records",
]
