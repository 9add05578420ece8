# src/knowledge_inbox/embedder/base.py
"""Embedder abstract base class."""

from abc import ABC, abstractmethod


class Embedder(ABC):
    """Abstract base class for embedding generation.

    Subclasses must implement embed_text and embed_texts. Async variants
    default to the sync calls.
    """

    #: Whether this embedder can produce vectors at all. Retrieval falls
    #: back to keyword search when False.
    available: bool = True

    @abstractmethod
    def embed_text(self, text: str) -> list[float]:
        """Generate an embedding vector for a single text."""
        ...

    @abstractmethod
    def embed_texts(self, texts: list[str]) -> list[list[float]]:
        """Generate embedding vectors for multiple texts (batched)."""
        ...

    async def aembed_text(self, text: str) -> list[float]:
        """Generate an embedding vector for a single text (async)."""
        return self.embed_text(text)

    async def aembed_texts(self, texts: list[str]) -> list[list[float]]:
        """Generate embedding vectors for multiple texts (async)."""
        return self.embed_texts(texts)
