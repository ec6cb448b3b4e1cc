"""Extractive answers: a reply built from the top document without an LLM.

Documents ingested from JSON records often carry ``topic`` and
``description`` fields; those are turned into a short recommendation.
Anything else falls back to the document text, capped in length.
"""

from __future__ import annotations

import json
from typing import Any

from retrieval.models import RetrievalDocument

from .prompts import UNKNOWN_ANSWER


def _parse_record(text: str) -> dict[str, Any]:
    try:
        data = json.loads(text)
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def build_extractive_answer(documents: list[RetrievalDocument], max_chars: int = 800) -> str:
    if not documents:
        return UNKNOWN_ANSWER

    text = documents[0].text or ""
    record = _parse_record(text)
    topic = record.get("topic")
    description = record.get("description")
    # Empty strings count as missing.
    if isinstance(topic, str) and topic:
        if isinstance(description, str) and description:
            return f"Recommendation: {topic}\n\nReason: {description}"
        return f"Recommendation: {topic}"

    if len(text) > max_chars:
        return f"{text[:max_chars]}..."
    return text
