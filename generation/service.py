from __future__ import annotations

import logging
from typing import Optional

from providers.base import ModelProvider
from retrieval.models import RetrievalDocument

from .config import GenerationConfig
from .context_builder import build_context
from .extractive import build_extractive_answer
from .models import AnswerMode
from .prompts import USER_PROMPT_TEMPLATE

logger = logging.getLogger(__name__)


class AnswerSynthesizer:
    def __init__(self, provider: ModelProvider):
        self.provider = provider

    def synthesize(
        self,
        question: str,
        documents: list[RetrievalDocument],
        config: Optional[GenerationConfig] = None,
    ) -> Optional[str]:
        """Turn ranked documents into an answer according to the answer mode.

        ``none`` returns None, ``extractive`` never calls the provider, and
        ``llm`` returns the provider's completion verbatim.
        """
        cfg = config or GenerationConfig()
        mode = AnswerMode(cfg.answer_mode)

        if mode is AnswerMode.NONE:
            return None

        if mode is AnswerMode.EXTRACTIVE:
            return build_extractive_answer(documents, cfg.max_extractive_chars)

        user_prompt = USER_PROMPT_TEMPLATE.format(
            context=build_context(documents),
            question=(question or "").strip(),
        )
        logger.debug("Calling chat with %d context documents", len(documents))
        return self.provider.chat(
            system=cfg.system_prompt,
            user=user_prompt,
            temperature=cfg.temperature,
        )
