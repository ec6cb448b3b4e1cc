"""
Ollama Provider - local embeddings and chat via the Ollama API

Thin wrapper around ``ollama.Client`` (ollama 0.4+) with the same error
mapping as the OpenAI-compatible provider.

Usage:
    from providers import OllamaProvider

    provider = OllamaProvider(embedding_model="nomic-embed-text")
    vector = provider.embed("Ein Beispieltext")
"""

import logging

import ollama

from common.exceptions import (
    ChatRequestFailed,
    EmbeddingRequestFailed,
    MalformedResponse,
)

from .base import ModelProvider

logger = logging.getLogger(__name__)


class OllamaProvider(ModelProvider):
    def __init__(
        self,
        chat_model: str = "llama3.1:latest",
        embedding_model: str = "nomic-embed-text",
        base_url: str = "http://localhost:11434",
    ):
        self.chat_model = chat_model
        self.embedding_model = embedding_model
        self.base_url = base_url
        self._client = ollama.Client(host=base_url)

    @property
    def name(self) -> str:
        return f"ollama:{self.embedding_model}"

    def embed(self, text: str) -> list[float]:
        try:
            response = self._client.embed(model=self.embedding_model, input=text)
        except ollama.ResponseError as e:
            raise EmbeddingRequestFailed(e.status_code, details=e.error) from e
        except ConnectionError as e:
            raise EmbeddingRequestFailed(
                None,
                details=f"Cannot connect to Ollama at {self.base_url}. Is Ollama running?",
            ) from e

        embeddings = response["embeddings"] if response else None
        if not embeddings or not embeddings[0]:
            raise EmbeddingRequestFailed(
                None, details="Embeddings response missing embedding vector"
            )
        return [float(v) for v in embeddings[0]]

    def chat(self, system: str, user: str, temperature: float) -> str:
        try:
            response = self._client.chat(
                model=self.chat_model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
                options={"temperature": temperature},
            )
        except ollama.ResponseError as e:
            raise ChatRequestFailed(e.status_code, details=e.error) from e
        except ConnectionError as e:
            raise ChatRequestFailed(
                None,
                details=f"Cannot connect to Ollama at {self.base_url}. Is Ollama running?",
            ) from e

        message = response["message"] if response else None
        content = message["content"] if message else None
        if not isinstance(content, str):
            raise MalformedResponse(response_content=str(response))
        return content
