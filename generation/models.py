from enum import Enum


class AnswerMode(str, Enum):
    NONE = "none"
    EXTRACTIVE = "extractive"
    LLM = "llm"
