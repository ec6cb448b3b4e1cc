"""
Pytest fixtures for the RAG engine tests.
"""

import logging

import pytest

from chunking import ChunkingConfig
from common.logging_config import PACKAGE_LOGGERS
from providers import MockProvider, ProviderConfig
from providers.base import ModelProvider
from rag import RagClient, RagConfig
from vector_store import IngestionPipeline, MemoryBackend, VectorStore


class FakeProvider(ModelProvider):
    """Non-mock provider with hand-picked vectors, so thresholds apply."""

    def __init__(self, vectors=None, default=None, reply="stub answer"):
        self.vectors = dict(vectors or {})
        self.default = default if default is not None else [1.0, 0.0, 0.0]
        self.reply = reply
        self.embed_calls = []
        self.chat_calls = []

    @property
    def name(self) -> str:
        return "fake"

    def embed(self, text):
        self.embed_calls.append(text)
        return list(self.vectors.get(text, self.default))

    def chat(self, system, user, temperature):
        self.chat_calls.append({"system": system, "user": user, "temperature": temperature})
        return self.reply


@pytest.fixture
def mock_provider():
    return MockProvider(dimension=16)


@pytest.fixture
def memory_store():
    return VectorStore(MemoryBackend(), "vector_store.test.json")


@pytest.fixture
def pipeline(memory_store, mock_provider):
    return IngestionPipeline(memory_store, mock_provider)


@pytest.fixture
def rag_config():
    return RagConfig(
        provider=ProviderConfig(mock=True, mock_embedding_dimension=16),
        storage="memory",
        chunking=ChunkingConfig(chunk_size=512, chunk_overlap=50),
    )


@pytest.fixture
def rag_client(rag_config):
    return RagClient(rag_config)


@pytest.fixture
def fruit_records():
    return [
        {"topic": "watermelon", "description": "Sweet and juicy, best eaten in summer."},
        {"topic": "hammer", "description": "A tool for driving nails into wood."},
        {"topic": "banana", "description": "A yellow fruit rich in potassium."},
    ]


@pytest.fixture(autouse=True)
def reset_package_loggers():
    """Undo setup_logging() so handlers never outlive a captured stream."""
    yield
    for name in PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
