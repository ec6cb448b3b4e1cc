from vector_store.models import StoredItem

from .models import RetrievalDocument


def hybrid_merge(
    semantic_ranked: list[tuple[StoredItem, float]],
    keyword_ranked: list[tuple[StoredItem, float]],
    semantic_weight: float,
    keyword_weight: float,
) -> list[RetrievalDocument]:
    """Union two rankings by item id and attach the weighted hybrid score.

    An item found by only one ranking gets 0 for the other dimension.
    Output order is semantic hits first, then keyword-only hits; callers sort.
    """
    by_id: dict[str, RetrievalDocument] = {}

    for item, score in semantic_ranked:
        by_id[item.id] = RetrievalDocument(
            id=item.id,
            text=item.text,
            metadata=item.metadata,
            semantic_score=score,
            keyword_score=0.0,
        )

    for item, score in keyword_ranked:
        existing = by_id.get(item.id)
        if existing is not None:
            existing.keyword_score = score
            continue
        by_id[item.id] = RetrievalDocument(
            id=item.id,
            text=item.text,
            metadata=item.metadata,
            semantic_score=0.0,
            keyword_score=score,
        )

    merged = list(by_id.values())
    for doc in merged:
        doc.score = semantic_weight * doc.semantic_score + keyword_weight * doc.keyword_score
    return merged
