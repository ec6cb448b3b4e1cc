from dataclasses import dataclass, replace


@dataclass
class RetrievalConfig:
    similarity_threshold: float = 0.35
    semantic_top_k: int = 8
    keyword_top_k: int = 8
    hybrid_top_k: int = 6
    strict: bool = False
    # Hybrid score = semantic_weight * semantic + keyword_weight * keyword.
    semantic_weight: float = 0.8
    keyword_weight: float = 0.2

    def normalized(self) -> "RetrievalConfig":
        """Copy with every top-k floored to 1."""
        return replace(
            self,
            semantic_top_k=max(1, int(self.semantic_top_k)),
            keyword_top_k=max(1, int(self.keyword_top_k)),
            hybrid_top_k=max(1, int(self.hybrid_top_k)),
        )
