"""
Request and response models for the RAG facade.

QueryRequest accepts the field spellings used by existing callers:
camelCase (``semanticTopK``), snake_case (``semantic_top_k``) and the legacy
upper-case keys (``SEMANTIC_TOP_K``). It also normalizes answer-mode synonyms
(``documents`` -> ``none``, ``answer`` -> ``llm``), the legacy ``useAgent``
switch and the ``topK`` shorthand before anything reaches retrieval.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from generation import AnswerMode, GenerationConfig
from retrieval import RetrievalConfig, RetrievalDocument


ANSWER_MODE_SYNONYMS = {
    "documents": AnswerMode.NONE.value,
    "answer": AnswerMode.LLM.value,
}

_LEGACY_KEYS = {
    "SIMILARITY_THRESHOLD": "similarityThreshold",
    "SEMANTIC_TOP_K": "semanticTopK",
    "KEYWORD_TOP_K": "keywordTopK",
    "HYBRID_TOP_K": "hybridTopK",
}


class QueryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    question: str = ""
    similarity_threshold: Optional[float] = Field(None, alias="similarityThreshold")
    semantic_top_k: Optional[int] = Field(None, alias="semanticTopK")
    keyword_top_k: Optional[int] = Field(None, alias="keywordTopK")
    hybrid_top_k: Optional[int] = Field(None, alias="hybridTopK")
    top_k: Optional[int] = Field(None, alias="topK")
    strict: Optional[bool] = None
    answer_mode: Optional[AnswerMode] = Field(None, alias="answerMode")
    use_agent: Optional[bool] = Field(None, alias="useAgent")
    temperature: Optional[float] = None
    system_prompt: Optional[str] = Field(None, alias="systemPrompt")

    @model_validator(mode="before")
    @classmethod
    def _accept_legacy_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if not data.get("question") and data.get("query") is not None:
            data["question"] = data["query"]
        for legacy, alias in _LEGACY_KEYS.items():
            if data.get(legacy) is not None and data.get(alias) is None:
                data[alias] = data[legacy]
        return data

    @field_validator("question", mode="before")
    @classmethod
    def _question_to_str(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("answer_mode", mode="before")
    @classmethod
    def _answer_mode_synonyms(cls, value: Any) -> Any:
        if isinstance(value, str):
            return ANSWER_MODE_SYNONYMS.get(value, value)
        return value

    def resolve_answer_mode(self, default: AnswerMode = AnswerMode.LLM) -> AnswerMode:
        if self.answer_mode is not None:
            return self.answer_mode
        if self.use_agent is False:
            return AnswerMode.EXTRACTIVE
        return default

    def resolve(
        self,
        retrieval_defaults: Optional[RetrievalConfig] = None,
        generation_defaults: Optional[GenerationConfig] = None,
    ) -> tuple[RetrievalConfig, GenerationConfig]:
        """Apply this request on top of the defaults.

        ``topK`` only fills the per-ranking limits that were not given
        individually.
        """
        r = retrieval_defaults or RetrievalConfig()
        g = generation_defaults or GenerationConfig()

        def _pick(value, fallback):
            return fallback if value is None else value

        def _k(value, fallback):
            if value is not None:
                return value
            return _pick(self.top_k, fallback)

        retrieval = RetrievalConfig(
            similarity_threshold=_pick(self.similarity_threshold, r.similarity_threshold),
            semantic_top_k=_k(self.semantic_top_k, r.semantic_top_k),
            keyword_top_k=_k(self.keyword_top_k, r.keyword_top_k),
            hybrid_top_k=_k(self.hybrid_top_k, r.hybrid_top_k),
            strict=_pick(self.strict, r.strict),
            semantic_weight=r.semantic_weight,
            keyword_weight=r.keyword_weight,
        ).normalized()
        generation = GenerationConfig(
            answer_mode=self.resolve_answer_mode(AnswerMode(g.answer_mode)),
            temperature=_pick(self.temperature, g.temperature),
            system_prompt=_pick(self.system_prompt, g.system_prompt),
            max_extractive_chars=g.max_extractive_chars,
        )
        return retrieval, generation


class UsedConfig(BaseModel):
    """Every parameter a query actually ran with."""
    model_config = ConfigDict(populate_by_name=True)

    similarity_threshold: float = Field(..., alias="similarityThreshold")
    semantic_top_k: int = Field(..., alias="semanticTopK")
    keyword_top_k: int = Field(..., alias="keywordTopK")
    hybrid_top_k: int = Field(..., alias="hybridTopK")
    strict: bool
    answer_mode: AnswerMode = Field(..., alias="answerMode")
    temperature: float
    system_prompt: str = Field(..., alias="systemPrompt")

    @classmethod
    def from_configs(cls, retrieval: RetrievalConfig, generation: GenerationConfig) -> "UsedConfig":
        return cls(
            similarity_threshold=retrieval.similarity_threshold,
            semantic_top_k=retrieval.semantic_top_k,
            keyword_top_k=retrieval.keyword_top_k,
            hybrid_top_k=retrieval.hybrid_top_k,
            strict=retrieval.strict,
            answer_mode=generation.answer_mode,
            temperature=generation.temperature,
            system_prompt=generation.system_prompt,
        )


class QueryResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    answer: Optional[str] = None
    documents: list[RetrievalDocument] = Field(default_factory=list)
    used_config: UsedConfig = Field(..., alias="usedConfig")

    def to_response(self) -> dict[str, Any]:
        """camelCase payload; ``answer`` is omitted when no answer was produced."""
        payload = self.model_dump(by_alias=True, mode="json")
        if self.answer is None:
            payload.pop("answer", None)
        return payload


class IngestRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(..., min_length=1)
    metadata: dict[str, Any] = Field(default_factory=dict)
    chunk_size: Optional[int] = Field(None, alias="chunkSize")
    chunk_overlap: Optional[int] = Field(None, alias="chunkOverlap")


def normalize_records(payload: Any) -> list[Any]:
    """Accept a list of records, a single record, or nothing."""
    if isinstance(payload, list):
        return payload
    if payload is None:
        return []
    return [payload]
