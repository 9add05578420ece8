# src/knowledge_inbox/chunking/base.py
"""Chunker abstract base class."""

from abc import ABC, abstractmethod


class Chunker(ABC):
    """Abstract base class for chunking policies."""

    @abstractmethod
    def chunk(self, text: str) -> list[str]:
        """Split text into an ordered list of non-empty, trimmed chunks."""
        ...
