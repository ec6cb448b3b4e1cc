"""
Mock Provider - deterministic offline embeddings and chat

Used when no credentials are configured or mock mode is requested. The same
input and dimension always produce the same vector, which keeps ingestion
and retrieval tests reproducible without a network.
"""

import re

from .base import ModelProvider


_CONTEXT_RE = re.compile(r"Context:\n([\s\S]*?)\n\nQuestion:\n")
_QUESTION_RE = re.compile(r"\n\nQuestion:\n([\s\S]*?)\n\nAnswer:")

MAX_CONTEXT_SNIPPET = 800


class MockProvider(ModelProvider):
    def __init__(self, dimension: int = 256):
        self.dimension = max(1, int(dimension))

    @property
    def is_mock(self) -> bool:
        return True

    @property
    def name(self) -> str:
        return f"mock:{self.dimension}"

    def embed(self, text: str) -> list[float]:
        data = (text or "").encode("utf-8")
        period = max(1, len(data))
        vector = []
        for i in range(self.dimension):
            byte = data[i % period] if data else 0
            vector.append(byte / 255 * 2 - 1)
        return vector

    def chat(self, system: str, user: str, temperature: float) -> str:
        context_match = _CONTEXT_RE.search(user or "")
        question_match = _QUESTION_RE.search(user or "")
        context = context_match.group(1).strip() if context_match else ""
        question = question_match.group(1).strip() if question_match else ""
        snippet = context[:MAX_CONTEXT_SNIPPET]
        return (
            f"(Mock) Question: {question}\n\n"
            f"Available context:\n{snippet}\n\n"
            "Conclusion: configure a real API key to get a model answer."
        )
