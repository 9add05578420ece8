# src/knowledge_inbox/stores/__init__.py
"""Storage abstractions for Knowledge Inbox."""

from knowledge_inbox.stores.base import ContentStore, VectorIndex
from knowledge_inbox.stores.chroma import ChromaVectorIndex
from knowledge_inbox.stores.exact_index import ExactVectorIndex
from knowledge_inbox.stores.memory_content import InMemoryContentStore
from knowledge_inbox.stores.sqlite_content import SQLiteContentStore

__all__ = [
    "ContentStore",
    "VectorIndex",
    "SQLiteContentStore",
    "InMemoryContentStore",
    "ExactVectorIndex",
    "ChromaVectorIndex",
]
