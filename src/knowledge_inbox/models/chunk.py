"""Chunk data models."""

from typing import Any

from pydantic import BaseModel, Field

from knowledge_inbox.models.item import ItemType


class Chunk(BaseModel):
    """A retrievable slice of an item's content."""

    id: str
    item_id: str
    content: str
    chunk_index: int
    embedding_ref: int | None = None

    @staticmethod
    def make_id(item_id: str, chunk_index: int) -> str:
        """Build the deterministic chunk id for a position within an item."""
        return f"{item_id}_chunk_{chunk_index}"


class ChunkRecord(Chunk):
    """A chunk joined with its parent item's type and metadata."""

    item_type: ItemType
    item_metadata: dict[str, Any] = Field(default_factory=dict)
