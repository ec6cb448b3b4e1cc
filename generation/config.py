from dataclasses import dataclass

from .models import AnswerMode
from .prompts import DEFAULT_SYSTEM_PROMPT


@dataclass
class GenerationConfig:
    answer_mode: AnswerMode = AnswerMode.LLM
    temperature: float = 0.7
    system_prompt: str = DEFAULT_SYSTEM_PROMPT
    max_extractive_chars: int = 800
