from typing import Any, Optional

from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from common.exceptions import (
    EmbeddingDimensionMismatch,
    ProviderError,
    StorageError,
)
from generation import AnswerMode

from .client import RagClient
from .config import RagConfig
from .models import IngestRequest, QueryRequest, normalize_records


def _http_error(exc: Exception) -> HTTPException:
    if isinstance(exc, ValidationError):
        errors = exc.errors(include_url=False, include_context=False, include_input=False)
        return HTTPException(status_code=422, detail=errors)
    if isinstance(exc, EmbeddingDimensionMismatch):
        return HTTPException(
            status_code=409,
            detail={"error": str(exc), "store": exc.store, "got": exc.got},
        )
    if isinstance(exc, (ProviderError, StorageError)):
        return HTTPException(status_code=502, detail=str(exc))
    return HTTPException(status_code=500, detail=str(exc))


def _query_request(body: Optional[dict[str, Any]]) -> QueryRequest:
    body = body or {}
    question = body.get("question") or body.get("query") or ""
    raw_config = body.get("config") if isinstance(body.get("config"), dict) else body
    options = {k: v for k, v in raw_config.items() if k not in {"question", "query"}}
    return QueryRequest.model_validate({**options, "question": question})


def create_app(
    config: Optional[RagConfig] = None,
    client: Optional[RagClient] = None,
) -> FastAPI:
    rag = client or RagClient(config or RagConfig.from_env())

    app = FastAPI(
        title="RAG Service",
        version="1.0.0",
        description="Hybrid (semantic + keyword) retrieval with optional LLM answers.",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.get("/rag/health")
    def health() -> dict:
        return {
            "ok": True,
            "vectorStoreKey": rag.store_key,
            "backend": rag.backend.name,
            "provider": rag.provider.name,
        }

    @app.post("/rag/init")
    def init(body: Optional[dict[str, Any]] = Body(default=None)) -> dict:
        items = normalize_records((body or {}).get("data"))
        try:
            count = rag.init_records(items, source="init")
        except Exception as exc:
            raise _http_error(exc) from exc
        return {"ok": True, "count": count, "vectorStoreKey": rag.store_key}

    @app.post("/rag/append")
    def append(body: Optional[dict[str, Any]] = Body(default=None)) -> dict:
        items = normalize_records((body or {}).get("data"))
        try:
            count = rag.append_records(items, source="append")
        except Exception as exc:
            raise _http_error(exc) from exc
        return {"ok": True, "count": count}

    @app.post("/rag/ingest")
    def ingest(request: IngestRequest) -> dict:
        try:
            result = rag.ingest_text(
                request.text,
                request.metadata,
                request.chunk_size,
                request.chunk_overlap,
            )
        except Exception as exc:
            raise _http_error(exc) from exc
        return {"ok": True, **result.model_dump()}

    def _query(body: Optional[dict[str, Any]]) -> list:
        try:
            result = rag.query(request=_query_request(body))
        except Exception as exc:
            raise _http_error(exc) from exc

        documents = result.to_response()["documents"]
        if result.used_config.answer_mode is AnswerMode.NONE:
            return documents
        if result.answer:
            return [result.answer]
        return documents

    @app.post("/rag/query")
    def query(body: Optional[dict[str, Any]] = Body(default=None)) -> list:
        return _query(body)

    @app.post("/rag/ask")
    def ask(body: Optional[dict[str, Any]] = Body(default=None)) -> list:
        return _query(body)

    @app.post("/rag/search")
    def search(body: Optional[dict[str, Any]] = Body(default=None)) -> dict:
        try:
            result = rag.query(request=_query_request(body))
        except Exception as exc:
            raise _http_error(exc) from exc
        return result.to_response()

    return app


app = create_app()
