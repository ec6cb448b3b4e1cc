import logging
from typing import Optional

from common.exceptions import EmbeddingDimensionMismatch
from providers.base import ModelProvider
from vector_store.models import VectorStoreDocument
from vector_store.store import VectorStore

from .config import RetrievalConfig
from .hybrid import hybrid_merge
from .keywords import keyword_score
from .models import RetrievalDocument
from .similarity import cosine_similarity

logger = logging.getLogger(__name__)


class RetrievalService:
    def __init__(self, store: VectorStore, provider: ModelProvider):
        self.store = store
        self.provider = provider

    def retrieve(
        self,
        question: str,
        config: Optional[RetrievalConfig] = None,
        document: Optional[VectorStoreDocument] = None,
    ) -> list[RetrievalDocument]:
        """Rank stored chunks for *question* by semantic + keyword relevance.

        Returns an empty list (without calling the provider) when the store
        is empty or the question is blank. Pass *document* to search an
        already loaded store instead of reading it again.
        """
        cfg = (config or RetrievalConfig()).normalized()

        if document is None:
            document = self.store.load()
        if document is None or not document.items:
            return []

        query = (question or "").strip()
        if not query:
            return []

        query_embedding = self.provider.embed(query)
        if document.dimension != len(query_embedding):
            raise EmbeddingDimensionMismatch(document.dimension, len(query_embedding))

        semantic_ranked = sorted(
            (
                (item, cosine_similarity(query_embedding, item.embedding))
                for item in document.items
            ),
            key=lambda pair: pair[1],
            reverse=True,
        )[: cfg.semantic_top_k]

        keyword_ranked = sorted(
            ((item, keyword_score(query, item.text)) for item in document.items),
            key=lambda pair: pair[1],
            reverse=True,
        )[: cfg.keyword_top_k]

        merged = hybrid_merge(
            semantic_ranked,
            keyword_ranked,
            cfg.semantic_weight,
            cfg.keyword_weight,
        )

        # Mock embeddings carry no meaning, so thresholds would only hide results.
        if not self.provider.is_mock:
            if cfg.strict:
                merged = [d for d in merged if d.semantic_score >= cfg.similarity_threshold]
            else:
                merged = [d for d in merged if d.score >= cfg.similarity_threshold]

        merged.sort(key=lambda doc: doc.score, reverse=True)
        results = merged[: cfg.hybrid_top_k]
        logger.debug(
            "Retrieved %d of %d items for %r", len(results), len(document.items), query
        )
        return results
