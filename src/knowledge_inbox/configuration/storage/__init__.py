# src/knowledge_inbox/configuration/storage/__init__.py
"""Storage configurations for Knowledge Inbox."""

from knowledge_inbox.configuration.storage.local import LocalStorage, build_vector_index
from knowledge_inbox.configuration.storage.memory import MemoryStorage

__all__ = ["LocalStorage", "MemoryStorage", "build_vector_index"]
