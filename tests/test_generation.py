"""Tests for generation - context building, extractive answers and synthesis."""

import json

import pytest

from generation import AnswerMode, AnswerSynthesizer, GenerationConfig
from generation.context_builder import build_context
from generation.extractive import build_extractive_answer
from generation.prompts import DEFAULT_SYSTEM_PROMPT, UNKNOWN_ANSWER
from retrieval import RetrievalDocument

from conftest import FakeProvider


def _doc(text: str, metadata=None, doc_id: str = "d1") -> RetrievalDocument:
    return RetrievalDocument(id=doc_id, text=text, metadata=metadata or {}, score=0.9)


# ---------------------------------------------------------------------------
# Context
# ---------------------------------------------------------------------------


class TestBuildContext:
    def test_numbers_documents_from_one(self):
        context = build_context([_doc("first"), _doc("second", doc_id="d2")])
        assert context == "# Document 1\nfirst\n\n# Document 2\nsecond"

    def test_includes_metadata_json(self):
        context = build_context([_doc("text", {"topic": "西瓜"})])
        assert context == '# Document 1\ntext\nmetadata: {"topic": "西瓜"}'

    def test_empty(self):
        assert build_context([]) == ""


# ---------------------------------------------------------------------------
# Extractive answers
# ---------------------------------------------------------------------------


class TestExtractiveAnswer:
    def test_no_documents(self):
        assert build_extractive_answer([]) == UNKNOWN_ANSWER

    def test_topic_and_description(self):
        text = json.dumps({"topic": "watermelon", "description": "Sweet and juicy."})
        assert build_extractive_answer([_doc(text)]) == (
            "Recommendation: watermelon\n\nReason: Sweet and juicy."
        )

    def test_topic_only(self):
        text = json.dumps({"topic": "hammer", "description": ""})
        assert build_extractive_answer([_doc(text)]) == "Recommendation: hammer"

    def test_uses_top_document_only(self):
        first = json.dumps({"topic": "watermelon"})
        second = json.dumps({"topic": "hammer"})
        answer = build_extractive_answer([_doc(first), _doc(second, doc_id="d2")])
        assert answer == "Recommendation: watermelon"

    def test_plain_text_returned(self):
        assert build_extractive_answer([_doc("Plain chunk text.")]) == "Plain chunk text."

    def test_json_without_topic_falls_back_to_text(self):
        text = json.dumps({"name": "x"})
        assert build_extractive_answer([_doc(text)]) == text

    def test_long_text_truncated(self):
        answer = build_extractive_answer([_doc("y" * 1000)])
        assert answer == "y" * 800 + "..."

    def test_text_at_limit_not_truncated(self):
        assert build_extractive_answer([_doc("y" * 800)]) == "y" * 800

    def test_custom_limit(self):
        assert build_extractive_answer([_doc("abcdef")], max_chars=3) == "abc..."


# ---------------------------------------------------------------------------
# AnswerSynthesizer
# ---------------------------------------------------------------------------


class TestAnswerSynthesizer:
    @pytest.fixture
    def provider(self):
        return FakeProvider(reply="It is a watermelon.")

    def test_none_mode_returns_none(self, provider):
        config = GenerationConfig(answer_mode=AnswerMode.NONE)
        assert AnswerSynthesizer(provider).synthesize("q", [_doc("t")], config) is None
        assert provider.chat_calls == []

    def test_extractive_never_calls_chat(self, provider):
        config = GenerationConfig(answer_mode=AnswerMode.EXTRACTIVE)
        answer = AnswerSynthesizer(provider).synthesize("q", [_doc("chunk")], config)
        assert answer == "chunk"
        assert provider.chat_calls == []

    def test_llm_prompt_format(self, provider):
        config = GenerationConfig(answer_mode=AnswerMode.LLM, temperature=0.1)
        answer = AnswerSynthesizer(provider).synthesize(
            "  what fruit?  ", [_doc("Watermelon is sweet.", {"topic": "watermelon"})], config
        )
        assert answer == "It is a watermelon."
        call = provider.chat_calls[0]
        assert call["system"] == DEFAULT_SYSTEM_PROMPT
        assert call["temperature"] == 0.1
        assert call["user"] == (
            "Context:\n"
            "# Document 1\nWatermelon is sweet.\nmetadata: {\"topic\": \"watermelon\"}\n\n"
            "Question:\nwhat fruit?\n\n"
            "Answer:"
        )

    def test_custom_system_prompt(self, provider):
        config = GenerationConfig(system_prompt="Be brief.")
        AnswerSynthesizer(provider).synthesize("q", [], config)
        assert provider.chat_calls[0]["system"] == "Be brief."

    def test_mode_given_as_string(self, provider):
        config = GenerationConfig(answer_mode="extractive")
        assert AnswerSynthesizer(provider).synthesize("q", [], config) == UNKNOWN_ANSWER

    def test_defaults_to_llm(self, provider):
        assert AnswerSynthesizer(provider).synthesize("q", []) == "It is a watermelon."
