"""
RAG Client - one object for ingestion, retrieval and answering

Wires the chunker, provider, vector store, retrieval service and answer
synthesizer together from a RagConfig.

Usage:
    from rag import RagClient, RagConfig
    from providers import ProviderConfig

    client = RagClient(RagConfig(provider=ProviderConfig(mock=True), storage="memory"))
    client.init_records([{"topic": "watermelon", "description": "Sweet and juicy."}])
    result = client.query("watermelon", answer_mode="extractive")
    print(result.answer)
"""

import json
import logging
from typing import Any, Optional

from chunking import TextChunker
from generation import AnswerMode, AnswerSynthesizer
from providers import ModelProvider, build_provider
from retrieval import RetrievalService
from vector_store import (
    IngestionPipeline,
    IngestResult,
    StorageBackend,
    VectorStore,
    create_backend,
)

from .config import RagConfig
from .models import QueryRequest, QueryResult, UsedConfig, normalize_records

logger = logging.getLogger(__name__)


class RagClient:
    def __init__(
        self,
        config: Optional[RagConfig] = None,
        provider: Optional[ModelProvider] = None,
        backend: Optional[StorageBackend] = None,
    ):
        """
        Args:
            config: Client configuration. Read from the environment if omitted.
            provider: Pre-built provider (for testing); otherwise built from config.
            backend: Pre-built storage backend (for testing); otherwise built from config.
        """
        self.config = config or RagConfig.from_env()
        self.provider = provider or build_provider(self.config.provider)
        self.backend = backend or create_backend(
            self.config.storage,
            data_dir=self.config.data_dir,
            url=self.config.storage_url,
        )
        self.store = VectorStore(self.backend, self.config.resolved_store_key())
        self.chunker = TextChunker(self.config.chunking)
        self.ingestion = IngestionPipeline(self.store, self.provider, self.chunker)
        self.retrieval = RetrievalService(self.store, self.provider)
        self.synthesizer = AnswerSynthesizer(self.provider)

    @property
    def store_key(self) -> str:
        return self.store.key

    @property
    def is_mock(self) -> bool:
        return self.provider.is_mock

    def ingest_text(
        self,
        text: str,
        metadata: Optional[dict[str, Any]] = None,
        chunk_size: Optional[int] = None,
        chunk_overlap: Optional[int] = None,
    ) -> IngestResult:
        return self.ingestion.ingest(text, metadata, chunk_size, chunk_overlap)

    def ingest_records(self, records: Any, source: str) -> int:
        """
        Ingest JSON records one by one.

        Each record is serialized to JSON text; metadata carries the source
        label, the record's position and its ``topic`` when that is a string.

        Returns:
            Number of records processed.
        """
        items = normalize_records(records)
        for index, record in enumerate(items):
            metadata: dict[str, Any] = {"source": source, "index": index}
            topic = record.get("topic") if isinstance(record, dict) else None
            if isinstance(topic, str):
                metadata["topic"] = topic
            self.ingest_text(json.dumps(record, ensure_ascii=False), metadata)
        return len(items)

    def init_records(self, records: Any, source: str = "init") -> int:
        """Replace the whole store with *records*."""
        with self.store.mutation():
            self.store.delete()
            count = self.ingest_records(records, source)
        logger.info("Initialized %s with %d records", self.store_key, count)
        return count

    def append_records(self, records: Any, source: str = "append") -> int:
        return self.ingest_records(records, source)

    def reset(self) -> None:
        self.store.delete()

    def query(
        self,
        question: str = "",
        request: Optional[QueryRequest] = None,
        **options: Any,
    ) -> QueryResult:
        """
        Retrieve documents for a question and synthesize an answer.

        Args:
            question: The question text (overrides ``request.question`` when given).
            request: Fully specified request; built from *options* if omitted.
            **options: QueryRequest fields, by name or camelCase alias.

        Returns:
            QueryResult with ``answer`` (None for answer mode ``none``),
            ranked ``documents`` and the resolved ``used_config``.
        """
        if request is None:
            request = QueryRequest.model_validate({**options, "question": question})
        elif question:
            request = request.model_copy(update={"question": question})

        retrieval_config, generation_config = request.resolve(
            self.config.retrieval, self.config.generation
        )
        used_config = UsedConfig.from_configs(retrieval_config, generation_config)

        document = self.store.load() if request.question.strip() else None
        if document is None or not document.items:
            # Nothing to search: no model call, only the extractive sentinel.
            answer = None
            if generation_config.answer_mode is AnswerMode.EXTRACTIVE:
                answer = self.synthesizer.synthesize(request.question, [], generation_config)
            return QueryResult(answer=answer, documents=[], used_config=used_config)

        documents = self.retrieval.retrieve(request.question, retrieval_config, document)
        answer = self.synthesizer.synthesize(request.question, documents, generation_config)
        return QueryResult(answer=answer, documents=documents, used_config=used_config)
