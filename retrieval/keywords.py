"""Lexical matching used by the keyword half of hybrid retrieval.

Tokens are lower-cased ASCII letter/digit runs plus CJK bigrams. CJK text has
no word separators, so overlapping character pairs stand in for words; a
single isolated CJK character is kept as-is but then dropped by the length
filter like any other one-character token.
"""

from __future__ import annotations

import re


_WORD_PATTERN = re.compile(r"[a-z0-9]+")
_CJK_PATTERN = re.compile(r"[\u4e00-\u9fff]+")

MIN_TOKEN_LENGTH = 2


def _tokenize(text: str) -> list[str]:
    normalized = (text or "").lower()
    tokens: list[str] = list(_WORD_PATTERN.findall(normalized))
    for run in _CJK_PATTERN.findall(normalized):
        if len(run) == 1:
            tokens.append(run)
            continue
        tokens.extend(run[i : i + 2] for i in range(len(run) - 1))
    return tokens


def extract_keywords(text: str) -> list[str]:
    """Deduplicated tokens of length >= 2, in first-seen order."""
    unique = dict.fromkeys(_tokenize(text))
    return [token for token in unique if len(token) >= MIN_TOKEN_LENGTH]


def keyword_score(query: str, text: str) -> float:
    """Fraction of the query's keywords that occur in *text* (0.0 - 1.0)."""
    query_tokens = extract_keywords(query)
    if not query_tokens:
        return 0.0
    text_tokens = set(extract_keywords(text))
    hits = sum(1 for token in query_tokens if token in text_tokens)
    return hits / len(query_tokens)
