"""
OpenAI-compatible Provider - embeddings and chat completions

Talks to any endpoint that implements the OpenAI ``/embeddings`` and
``/chat/completions`` routes (OpenAI itself, Volcengine Ark, vLLM, ...).

Error mapping:
- HTTP error status on /embeddings      -> EmbeddingRequestFailed(status)
- success without a vector              -> EmbeddingRequestFailed
- HTTP error status on /chat            -> ChatRequestFailed(status)
- success without string content        -> MalformedResponse

The SDK's own retries are disabled; retry policy belongs to the caller.
"""

import logging
from typing import Optional

from openai import APIConnectionError, APIStatusError, OpenAI

from common.exceptions import (
    ChatRequestFailed,
    EmbeddingRequestFailed,
    MalformedResponse,
)

from .base import ModelProvider

logger = logging.getLogger(__name__)


class OpenAICompatibleProvider(ModelProvider):
    def __init__(
        self,
        api_key: str,
        base_url: str,
        chat_model: str = "gpt-4",
        embedding_model: str = "text-embedding-3-small",
        timeout: float = 60.0,
        client: Optional[OpenAI] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.chat_model = chat_model
        self.embedding_model = embedding_model
        self._client = client or OpenAI(
            api_key=api_key,
            base_url=self.base_url,
            timeout=timeout,
            max_retries=0,
        )

    @property
    def name(self) -> str:
        return f"openai:{self.embedding_model}"

    def embed(self, text: str) -> list[float]:
        try:
            response = self._client.embeddings.create(
                model=self.embedding_model,
                input=text,
            )
        except APIStatusError as e:
            logger.warning("Embedding request failed with HTTP %s", e.status_code)
            raise EmbeddingRequestFailed(e.status_code, details=e.message) from e
        except APIConnectionError as e:
            raise EmbeddingRequestFailed(
                None, details=f"Cannot reach {self.base_url}: {e}"
            ) from e

        data = getattr(response, "data", None) or []
        embedding = getattr(data[0], "embedding", None) if data else None
        if not isinstance(embedding, list) or not embedding:
            raise EmbeddingRequestFailed(
                None, details="Embeddings response missing embedding vector"
            )
        return [float(v) for v in embedding]

    def chat(self, system: str, user: str, temperature: float) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self.chat_model,
                temperature=temperature,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
            )
        except APIStatusError as e:
            logger.warning("Chat request failed with HTTP %s", e.status_code)
            raise ChatRequestFailed(e.status_code, details=e.message) from e
        except APIConnectionError as e:
            raise ChatRequestFailed(
                None, details=f"Cannot reach {self.base_url}: {e}"
            ) from e

        choices = getattr(response, "choices", None) or []
        message = getattr(choices[0], "message", None) if choices else None
        content = getattr(message, "content", None)
        if not isinstance(content, str):
            raise MalformedResponse(response_content=str(response))
        return content
