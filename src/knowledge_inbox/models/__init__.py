# src/knowledge_inbox/models/__init__.py
"""Data models for Knowledge Inbox."""

from knowledge_inbox.models.chunk import Chunk, ChunkRecord
from knowledge_inbox.models.item import Item, ItemType
from knowledge_inbox.models.results import (
    NO_RELEVANT_CONTENT_ANSWER,
    IngestSummary,
    QueryResponse,
    RetrievalMode,
    ScoredChunk,
    SourceView,
    VectorMatch,
)

__all__ = [
    "Item",
    "ItemType",
    "Chunk",
    "ChunkRecord",
    "VectorMatch",
    "ScoredChunk",
    "SourceView",
    "QueryResponse",
    "RetrievalMode",
    "IngestSummary",
    "NO_RELEVANT_CONTENT_ANSWER",
]
