from dataclasses import dataclass
import os
from typing import Optional


PLACEHOLDER_API_KEY = "your_api_key"


@dataclass
class ProviderConfig:
    backend: str = "openai"
    api_key: str = ""
    base_url: str = "https://ark.cn-beijing.volces.com/api/v3"
    chat_model: str = "gpt-4"
    embedding_model: str = "text-embedding-3-small"
    ollama_base_url: str = "http://localhost:11434"
    mock: Optional[bool] = None
    mock_embedding_dimension: int = 256
    timeout: float = 60.0

    def use_mock(self) -> bool:
        if self.mock is not None:
            return self.mock
        if self.backend == "mock":
            return True
        if self.backend == "openai":
            return not self.api_key or self.api_key == PLACEHOLDER_API_KEY
        return False

    @classmethod
    def from_env(cls) -> "ProviderConfig":
        def _bool(name: str) -> Optional[bool]:
            value = os.environ.get(name)
            if value is None or value == "":
                return None
            return value.strip().lower() in {"1", "true", "yes", "on"}

        dimension = os.environ.get("RAG_MOCK_EMBEDDING_DIMENSION")
        timeout = os.environ.get("RAG_PROVIDER_TIMEOUT")
        return cls(
            backend=os.environ.get("RAG_PROVIDER", cls.backend),
            api_key=os.environ.get("RAG_API_KEY") or os.environ.get("OPENAI_API_KEY", cls.api_key),
            base_url=os.environ.get("RAG_BASE_URL", cls.base_url),
            chat_model=os.environ.get("RAG_CHAT_MODEL", cls.chat_model),
            embedding_model=os.environ.get("RAG_EMBEDDING_MODEL", cls.embedding_model),
            ollama_base_url=os.environ.get("OLLAMA_BASE_URL", cls.ollama_base_url),
            mock=_bool("RAG_MOCK"),
            mock_embedding_dimension=int(dimension) if dimension else cls.mock_embedding_dimension,
            timeout=float(timeout) if timeout else cls.timeout,
        )
