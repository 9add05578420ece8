# src/knowledge_inbox/configuration/storage/local.py
"""Local filesystem storage configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from knowledge_inbox.settings import Settings
    from knowledge_inbox.stores import ContentStore, VectorIndex

VectorIndexKind = Literal["exact", "approximate"]

DATABASE_FILENAME = "inbox.db"


def build_vector_index(kind: VectorIndexKind, dimensions: int) -> VectorIndex:
    """Build the in-memory vector index named by kind."""
    from knowledge_inbox.stores import ChromaVectorIndex, ExactVectorIndex

    if kind == "approximate":
        return ChromaVectorIndex(dimensions=dimensions)
    if kind == "exact":
        return ExactVectorIndex(dimensions=dimensions)
    raise ValueError(f"Unknown vector index '{kind}'. Use 'exact' or 'approximate'.")


@dataclass(frozen=True)
class LocalStorage:
    """Local filesystem storage: items and chunks persisted in SQLite.

    Files created in the data directory:
    - inbox.db: Items and chunks (SQLite)

    The vector index always lives in memory and is rebuilt from stored
    chunks by lazy backfill after a restart.

    Args:
        data_dir: Base directory for storage files. Created if it doesn't exist.
        vector_index: "exact" (brute-force cosine) or "approximate" (ChromaDB HNSW).

    Example:
        storage = LocalStorage("./inbox_data")
    """

    data_dir: str
    vector_index: VectorIndexKind = "exact"

    @property
    def db_path(self) -> str:
        return os.path.join(self.data_dir, DATABASE_FILENAME)

    def build_stores(self, settings: Settings) -> tuple[ContentStore, VectorIndex]:
        """Build the SQLite content store and the configured vector index."""
        from knowledge_inbox.stores import SQLiteContentStore

        Path(self.data_dir).mkdir(parents=True, exist_ok=True)

        content_store = SQLiteContentStore(self.db_path)
        index = build_vector_index(self.vector_index, settings.embedding_dimensions)
        return content_store, index
