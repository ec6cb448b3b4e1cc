from dataclasses import dataclass, field
import os
import re
from typing import Optional

from dotenv import load_dotenv

from chunking import ChunkingConfig
from generation import GenerationConfig
from providers import ProviderConfig
from retrieval import RetrievalConfig


_UNSAFE_KEY_CHARS = re.compile(r"[^a-zA-Z0-9_-]+")


def store_safe_name(value: str) -> str:
    return _UNSAFE_KEY_CHARS.sub("_", value)


def default_store_key(embedding_model: str) -> str:
    """Vectors from different embedding models never share a store."""
    return f"vector_store.{store_safe_name(embedding_model)}.json"


@dataclass
class RagConfig:
    provider: ProviderConfig = field(default_factory=ProviderConfig)
    storage: str = "file"
    data_dir: str = "data/rag"
    storage_url: Optional[str] = None
    store_key: Optional[str] = None
    chunking: ChunkingConfig = field(default_factory=ChunkingConfig)
    retrieval: RetrievalConfig = field(default_factory=RetrievalConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)

    def resolved_store_key(self) -> str:
        return self.store_key or default_store_key(self.provider.embedding_model)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "RagConfig":
        load_dotenv(env_file)

        def _int(name: str, default: int) -> int:
            value = os.environ.get(name)
            return int(value) if value else default

        defaults = ChunkingConfig()
        return cls(
            provider=ProviderConfig.from_env(),
            storage=os.environ.get("RAG_STORAGE", cls.storage),
            data_dir=os.environ.get("RAG_DATA_DIR", cls.data_dir),
            storage_url=os.environ.get("RAG_STORAGE_URL") or None,
            store_key=os.environ.get("RAG_VECTOR_STORE_KEY") or None,
            chunking=ChunkingConfig(
                chunk_size=_int("RAG_CHUNK_SIZE", defaults.chunk_size),
                chunk_overlap=_int("RAG_CHUNK_OVERLAP", defaults.chunk_overlap),
            ),
        )
