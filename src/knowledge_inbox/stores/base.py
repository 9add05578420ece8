# src/knowledge_inbox/stores/base.py
"""Abstract base classes for storage."""

import threading
from abc import ABC, abstractmethod

from knowledge_inbox.exceptions import DimensionMismatch
from knowledge_inbox.models import Chunk, ChunkRecord, Item, VectorMatch


class ContentStore(ABC):
    """Abstract base class for durable item and chunk storage."""

    @abstractmethod
    def insert_item(self, item: Item) -> None:
        """Store a new item."""
        ...

    @abstractmethod
    def insert_chunk(self, chunk: Chunk) -> None:
        """Store a new chunk. Its parent item must already exist."""
        ...

    @abstractmethod
    def set_embedding_ref(self, chunk_id: str, embedding_id: int) -> None:
        """Record the vector index entry computed for a chunk."""
        ...

    @abstractmethod
    def get_all_items(self) -> list[Item]:
        """Get every item, newest first."""
        ...

    @abstractmethod
    def get_item(self, item_id: str) -> Item | None:
        """Retrieve an item by ID. Returns None if not found."""
        ...

    @abstractmethod
    def get_chunks_by_ids(self, chunk_ids: list[str]) -> list[ChunkRecord]:
        """Retrieve chunks joined with their item. Skips missing chunks."""
        ...

    @abstractmethod
    def get_all_chunks(self) -> list[ChunkRecord]:
        """Get every chunk joined with its item, ordered by item then chunk index."""
        ...

    @abstractmethod
    def count_items(self) -> int:
        """Count the total number of items in the store."""
        ...

    @abstractmethod
    def count_chunks(self) -> int:
        """Count the total number of chunks in the store."""
        ...


class VectorIndex(ABC):
    """Abstract base class for chunk embedding search.

    Entries are only ever appended: re-adding a chunk creates a second
    entry. ``clear`` is the only way to drop entries.
    """

    def __init__(self, dimensions: int) -> None:
        if dimensions < 1:
            raise ValueError("dimensions must be positive")
        self.dimensions = dimensions
        self._lock = threading.Lock()

    def _check_dimensions(self, vector: list[float]) -> None:
        if len(vector) != self.dimensions:
            raise DimensionMismatch(self.dimensions, len(vector))

    @abstractmethod
    def add_embedding(self, chunk_id: str, vector: list[float]) -> int:
        """Add a vector for a chunk. Returns the new sequential embedding ID."""
        ...

    @abstractmethod
    def has_embedding(self, chunk_id: str) -> bool:
        """Check whether any entry exists for the chunk."""
        ...

    @abstractmethod
    def search(self, vector: list[float], k: int = 5) -> list[VectorMatch]:
        """Return up to k matches ordered by descending cosine similarity."""
        ...

    @abstractmethod
    def get_size(self) -> int:
        """Count the embeddings currently stored."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Drop every entry and restart embedding IDs at zero."""
        ...

    def close(self) -> None:
        """Release any resources held by the index."""
