# src/knowledge_inbox/embedder/null.py
"""Embedder used when no embedding provider is configured."""

from knowledge_inbox.embedder.base import Embedder
from knowledge_inbox.exceptions import ProviderError


class NoEmbedder(Embedder):
    """Null embedder. Marks the system as keyword-only.

    Every embedding call raises ProviderError; callers are expected to
    check ``available`` first.
    """

    available = False

    def embed_text(self, text: str) -> list[float]:
        raise ProviderError("No embedding provider configured")

    def embed_texts(self, texts: list[str]) -> list[list[float]]:
        raise ProviderError("No embedding provider configured")
