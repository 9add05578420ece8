# src/knowledge_inbox/configuration/__init__.py
"""Configuration objects for Knowledge Inbox.

Instead of factory methods, you pass configuration objects that know how to
build their components.

Provider configurations (build AI components):
- LiteLLMProvider: Uses LiteLLM for answer and embedding calls

Storage configurations (build data stores):
- LocalStorage: SQLite on disk plus an in-memory vector index
- MemoryStorage: Everything in memory

Example:
    from knowledge_inbox import Inbox, LiteLLMProvider, LocalStorage

    inbox = Inbox(
        provider=LiteLLMProvider(llm="openai/gpt-4o-mini", embedding="openai/text-embedding-3-small"),
        storage=LocalStorage("./data"),
    )
"""

from knowledge_inbox.configuration.base import ProviderConfig, StorageConfig
from knowledge_inbox.configuration.providers import LiteLLMProvider
from knowledge_inbox.configuration.storage import LocalStorage, MemoryStorage

__all__ = [
    "ProviderConfig",
    "StorageConfig",
    "LiteLLMProvider",
    "LocalStorage",
    "MemoryStorage",
]
