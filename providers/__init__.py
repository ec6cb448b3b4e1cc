"""
Embedding/chat providers for the RAG engine.

Quick Start:
    from providers import ProviderConfig, build_provider

    provider = build_provider(ProviderConfig(mock=True))
    vector = provider.embed("watermelon")
"""

from .base import ModelProvider
from .config import ProviderConfig
from .factory import build_provider
from .mock import MockProvider
from .ollama_provider import OllamaProvider
from .openai_compatible import OpenAICompatibleProvider

__all__ = [
    "ModelProvider",
    "ProviderConfig",
    "build_provider",
    "MockProvider",
    "OllamaProvider",
    "OpenAICompatibleProvider",
]
