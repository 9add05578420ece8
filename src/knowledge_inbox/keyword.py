# src/knowledge_inbox/keyword.py
"""Keyword scoring used when no embedding provider is configured."""

import re

from knowledge_inbox.models import ChunkRecord, ScoredChunk

# Tokens this short or shorter carry no signal ("a", "is", "of")
MIN_KEYWORD_LENGTH = 3

# Leading or trailing punctuation and symbols in any script
_EDGE_PUNCTUATION = re.compile(r"^[\W_]+|[\W_]+$")


def extract_keywords(question: str) -> list[str]:
    """Lower-case the question and split it into distinct keywords.

    Surrounding punctuation is stripped, so "python?" counts as "python".
    Order of first appearance is preserved.
    """
    keywords: list[str] = []
    for token in question.lower().split():
        token = _EDGE_PUNCTUATION.sub("", token)
        if len(token) >= MIN_KEYWORD_LENGTH and token not in keywords:
            keywords.append(token)
    return keywords


def score_text(text: str, keywords: list[str]) -> int:
    """Sum of non-overlapping occurrences of each keyword in the lower-cased text."""
    lowered = text.lower()
    return sum(lowered.count(keyword) for keyword in keywords)


def keyword_search(question: str, chunks: list[ChunkRecord], k: int) -> list[ScoredChunk]:
    """Rank chunks by keyword score.

    Chunks scoring zero are dropped. Ties keep the order of ``chunks``.
    """
    keywords = extract_keywords(question)
    if not keywords or k <= 0:
        return []

    scored = [
        ScoredChunk(chunk=chunk, score=float(score))
        for chunk in chunks
        if (score := score_text(chunk.content, keywords)) > 0
    ]
    scored.sort(key=lambda s: s.score, reverse=True)
    return scored[:k]
