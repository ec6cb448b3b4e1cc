import logging

from .base import ModelProvider
from .config import ProviderConfig
from .mock import MockProvider
from .ollama_provider import OllamaProvider
from .openai_compatible import OpenAICompatibleProvider

logger = logging.getLogger(__name__)


def build_provider(config: ProviderConfig) -> ModelProvider:
    """Create the provider selected by *config*."""
    if config.use_mock():
        logger.info("Using mock provider (dimension=%d)", config.mock_embedding_dimension)
        return MockProvider(dimension=config.mock_embedding_dimension)
    if config.backend == "ollama":
        return OllamaProvider(
            chat_model=config.chat_model,
            embedding_model=config.embedding_model,
            base_url=config.ollama_base_url,
        )
    if config.backend == "openai":
        return OpenAICompatibleProvider(
            api_key=config.api_key,
            base_url=config.base_url,
            chat_model=config.chat_model,
            embedding_model=config.embedding_model,
            timeout=config.timeout,
        )
    raise ValueError(f"Unsupported provider backend: {config.backend}")
