# src/knowledge_inbox/stores/memory_content.py
"""In-memory content store, used for tests and throwaway sessions."""

from knowledge_inbox.models import Chunk, ChunkRecord, Item
from knowledge_inbox.stores.base import ContentStore


class InMemoryContentStore(ContentStore):
    """Dict-backed content store. Contents are lost when the process exits."""

    def __init__(self) -> None:
        self._items: dict[str, Item] = {}
        self._chunks: dict[str, Chunk] = {}

    def insert_item(self, item: Item) -> None:
        if item.id in self._items:
            raise ValueError(f"Item already exists: {item.id}")
        self._items[item.id] = item.model_copy(deep=True)

    def insert_chunk(self, chunk: Chunk) -> None:
        if chunk.item_id not in self._items:
            raise ValueError(f"Unknown item for chunk: {chunk.item_id}")
        if chunk.id in self._chunks:
            raise ValueError(f"Chunk already exists: {chunk.id}")
        self._chunks[chunk.id] = Chunk(**chunk.model_dump(include=set(Chunk.model_fields)))

    def set_embedding_ref(self, chunk_id: str, embedding_id: int) -> None:
        chunk = self._chunks.get(chunk_id)
        if chunk is not None:
            chunk.embedding_ref = embedding_id

    def get_all_items(self) -> list[Item]:
        # Insertion order breaks timestamp ties, newest insert first
        ordered = list(self._items.values())
        ordered.reverse()
        return [
            item.model_copy(deep=True)
            for item in sorted(ordered, key=lambda i: i.created_at, reverse=True)
        ]

    def get_item(self, item_id: str) -> Item | None:
        item = self._items.get(item_id)
        return item.model_copy(deep=True) if item is not None else None

    def get_chunks_by_ids(self, chunk_ids: list[str]) -> list[ChunkRecord]:
        return [self._record(self._chunks[cid]) for cid in chunk_ids if cid in self._chunks]

    def get_all_chunks(self) -> list[ChunkRecord]:
        item_order = {item_id: position for position, item_id in enumerate(self._items)}
        ordered = sorted(
            self._chunks.values(),
            key=lambda c: (self._items[c.item_id].created_at, item_order[c.item_id], c.chunk_index),
        )
        return [self._record(chunk) for chunk in ordered]

    def count_items(self) -> int:
        return len(self._items)

    def count_chunks(self) -> int:
        return len(self._chunks)

    def _record(self, chunk: Chunk) -> ChunkRecord:
        item = self._items[chunk.item_id]
        return ChunkRecord(
            **chunk.model_dump(),
            item_type=item.type,
            item_metadata=dict(item.metadata),
        )
