from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RetrievalDocument(BaseModel):
    """A stored item scored against one query. Never persisted."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    text: str
    metadata: dict[str, Any] = Field(default_factory=dict)
    semantic_score: float = Field(0.0, alias="semanticScore")
    keyword_score: float = Field(0.0, alias="keywordScore")
    score: float = 0.0
