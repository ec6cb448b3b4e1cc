"""Abstract base class for embedding/chat model providers.

Ingestion and retrieval only talk to this interface. Concrete providers:

    MockProvider              deterministic, offline (tests, no credentials)
    OpenAICompatibleProvider  any OpenAI-compatible endpoint via the openai SDK
    OllamaProvider            local models via the ollama SDK

The choice is made by configuration in :func:`providers.factory.build_provider`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ModelProvider(ABC):
    """Contract for turning text into vectors and prompts into completions."""

    @abstractmethod
    def embed(self, text: str) -> list[float]:
        """Return the embedding vector for *text*.

        Raises:
            EmbeddingRequestFailed: upstream failure or a response without a vector.
        """

    @abstractmethod
    def chat(self, system: str, user: str, temperature: float) -> str:
        """Return the completion text for a system + user message pair.

        Raises:
            ChatRequestFailed: upstream failure.
            MalformedResponse: success status but no usable text content.
        """

    @property
    def is_mock(self) -> bool:
        """True for offline providers whose scores should not be threshold-filtered."""
        return False

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable identifier, e.g. ``"openai:text-embedding-3-small"``."""
