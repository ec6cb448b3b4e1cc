"""Tests for rag.app - the FastAPI service."""

import pytest
from fastapi.testclient import TestClient

from common.exceptions import EmbeddingRequestFailed
from rag import RagClient
from rag.app import create_app
from vector_store import MemoryBackend

from conftest import FakeProvider


@pytest.fixture
def http(rag_client):
    return TestClient(create_app(client=rag_client))


@pytest.fixture
def fake_provider():
    return FakeProvider(reply="LLM says watermelon.")


@pytest.fixture
def fake_http(rag_config, fake_provider):
    client = RagClient(rag_config, provider=fake_provider, backend=MemoryBackend())
    return TestClient(create_app(client=client))


def test_health(http, rag_client):
    response = http.get("/rag/health")
    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert body["vectorStoreKey"] == rag_client.store_key
    assert body["backend"] == "memory"
    assert body["provider"] == "mock:16"


def test_init_and_append(http, fruit_records, rag_client):
    response = http.post("/rag/init", json={"data": fruit_records})
    assert response.json() == {"ok": True, "count": 3, "vectorStoreKey": rag_client.store_key}

    response = http.post("/rag/append", json={"data": {"topic": "kiwi"}})
    assert response.json() == {"ok": True, "count": 1}
    assert rag_client.store.count() == 4


def test_init_without_body_clears_store(http, fruit_records, rag_client):
    http.post("/rag/init", json={"data": fruit_records})
    response = http.post("/rag/init")
    assert response.json()["count"] == 0
    assert rag_client.store.count() == 0


def test_query_none_mode_returns_documents(fake_http, fruit_records):
    fake_http.post("/rag/init", json={"data": fruit_records})
    response = fake_http.post("/rag/query", json={"question": "watermelon", "answerMode": "none"})
    assert response.status_code == 200
    documents = response.json()
    assert len(documents) == 3
    assert "watermelon" in documents[0]["text"]
    assert {"semanticScore", "keywordScore", "score"} <= set(documents[0])


def test_query_llm_mode_returns_answer_list(fake_http, fruit_records):
    fake_http.post("/rag/init", json={"data": fruit_records})
    response = fake_http.post("/rag/query", json={"question": "watermelon"})
    assert response.json() == ["LLM says watermelon."]


def test_query_extractive_via_nested_config(fake_http, fruit_records):
    fake_http.post("/rag/init", json={"data": fruit_records})
    response = fake_http.post(
        "/rag/ask",
        json={"question": "hammer", "config": {"answerMode": "extractive", "hybridTopK": 1}},
    )
    assert response.json() == ["Recommendation: hammer\n\nReason: A tool for driving nails into wood."]


def test_query_accepts_query_field_and_synonyms(fake_http, fruit_records):
    fake_http.post("/rag/init", json={"data": fruit_records})
    response = fake_http.post("/rag/query", json={"query": "watermelon", "answerMode": "documents"})
    assert "watermelon" in response.json()[0]["text"]


def test_query_empty_store_none_mode(http):
    response = http.post("/rag/query", json={"question": "watermelon", "answerMode": "none"})
    assert response.json() == []


def test_query_use_agent_false(fake_http, fruit_records):
    fake_http.post("/rag/init", json={"data": fruit_records})
    response = fake_http.post("/rag/query", json={"question": "watermelon", "useAgent": False})
    assert response.json()[0].startswith("Recommendation: watermelon")


def test_search_returns_envelope(fake_http, fruit_records):
    fake_http.post("/rag/init", json={"data": fruit_records})
    response = fake_http.post("/rag/search", json={"question": "watermelon", "answerMode": "none"})
    body = response.json()
    assert "answer" not in body
    assert len(body["documents"]) == 3
    assert body["usedConfig"]["answerMode"] == "none"
    assert body["usedConfig"]["hybridTopK"] == 6


def test_ingest_text(http, rag_client):
    response = http.post(
        "/rag/ingest",
        json={"text": "abcdefgh", "metadata": {"source": "manual"}, "chunkSize": 4, "chunkOverlap": 0},
    )
    assert response.json() == {"ok": True, "added": 2, "skipped": 0}
    assert rag_client.store.count() == 2


def test_ingest_empty_text_rejected(http):
    assert http.post("/rag/ingest", json={"text": ""}).status_code == 422


def test_invalid_answer_mode_is_422(http):
    response = http.post("/rag/query", json={"question": "q", "answerMode": "poetry"})
    assert response.status_code == 422


def test_dimension_mismatch_is_409(fake_http, fake_provider, fruit_records):
    fake_http.post("/rag/init", json={"data": fruit_records})
    fake_provider.default = [1.0, 0.0]
    response = fake_http.post("/rag/query", json={"question": "watermelon"})
    assert response.status_code == 409
    detail = response.json()["detail"]
    assert (detail["store"], detail["got"]) == (3, 2)


def test_provider_failure_is_502(fake_http, fake_provider, fruit_records):
    fake_http.post("/rag/init", json={"data": fruit_records})

    def fail(text):
        raise EmbeddingRequestFailed(503)

    fake_provider.embed = fail
    response = fake_http.post("/rag/query", json={"question": "watermelon"})
    assert response.status_code == 502
    assert "Embeddings request failed: 503" in response.json()["detail"]


def test_corrupt_store_is_500(rag_config):
    backend = MemoryBackend()
    client = RagClient(rag_config, backend=backend)
    backend.put(client.store_key, "{not json")
    response = TestClient(create_app(client=client)).post("/rag/query", json={"question": "q"})
    assert response.status_code == 500
    assert "Invalid vector store format" in response.json()["detail"]


def test_query_empty_store_llm_mode(fake_http, fake_provider):
    response = fake_http.post("/rag/query", json={"question": "watermelon"})
    assert response.json() == []
    assert fake_provider.chat_calls == []
