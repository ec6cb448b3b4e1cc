from __future__ import annotations

import json

from retrieval.models import RetrievalDocument


def _document_block(idx: int, doc: RetrievalDocument) -> str:
    block = f"# Document {idx}\n{doc.text}"
    if doc.metadata:
        block += f"\nmetadata: {json.dumps(doc.metadata, ensure_ascii=False)}"
    return block


def build_context(documents: list[RetrievalDocument]) -> str:
    """Number each document and join them with blank lines."""
    return "\n\n".join(
        _document_block(idx, doc) for idx, doc in enumerate(documents, start=1)
    )
