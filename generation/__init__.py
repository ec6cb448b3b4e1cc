"""
Generation component for RAG pipelines.

Turns ranked retrieval documents into an answer: none, extractive, or
LLM-generated with the documents as context.
"""

__version__ = "1.0.0"

from .config import GenerationConfig
from .context_builder import build_context
from .extractive import build_extractive_answer
from .models import AnswerMode
from .prompts import DEFAULT_SYSTEM_PROMPT, UNKNOWN_ANSWER
from .service import AnswerSynthesizer

__all__ = [
    "__version__",
    "GenerationConfig",
    "AnswerMode",
    "AnswerSynthesizer",
    "build_context",
    "build_extractive_answer",
    "DEFAULT_SYSTEM_PROMPT",
    "UNKNOWN_ANSWER",
]
