# src/knowledge_inbox/configuration/storage/memory.py
"""In-memory storage configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from knowledge_inbox.configuration.storage.local import VectorIndexKind, build_vector_index

if TYPE_CHECKING:
    from knowledge_inbox.settings import Settings
    from knowledge_inbox.stores import ContentStore, VectorIndex


@dataclass(frozen=True)
class MemoryStorage:
    """Storage that keeps everything in process memory. Nothing is persisted.

    Example:
        inbox = Inbox(provider=LiteLLMProvider(llm="openai/gpt-4o-mini"), storage=MemoryStorage())
    """

    vector_index: VectorIndexKind = "exact"

    def build_stores(self, settings: Settings) -> tuple[ContentStore, VectorIndex]:
        from knowledge_inbox.stores import InMemoryContentStore

        return InMemoryContentStore(), build_vector_index(
            self.vector_index, settings.embedding_dimensions
        )
