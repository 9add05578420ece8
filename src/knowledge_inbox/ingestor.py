"""Ingestion pipeline for Knowledge Inbox."""

import logging
from collections.abc import Callable
from typing import Any
from uuid import uuid4

from knowledge_inbox.chunking import Chunker
from knowledge_inbox.embedder import Embedder
from knowledge_inbox.exceptions import DimensionMismatch, ProviderError
from knowledge_inbox.models import Chunk, IngestSummary, Item, ItemType
from knowledge_inbox.settings import EmbeddingMode
from knowledge_inbox.stores import ContentStore, VectorIndex

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int, str], None]
"""Callback for ingestion progress updates.

Args:
    event: Event type: "storing", "chunking" or "embedding"
    current: Current progress count (0 to total)
    total: Total items to process
    message: Human-readable status message

Example:
    def on_progress(event: str, current: int, total: int, message: str) -> None:
        print(f"[{event}] {current}/{total}: {message}")
"""


def _no_progress(event: str, current: int, total: int, message: str) -> None:
    pass


class Ingestor:
    """Orchestrates the ingestion pipeline.

    Pipeline:
    1. Cap content to max_content_length
    2. Store the item in the ContentStore
    3. Chunk the content and cap the chunk count
    4. In eager mode, embed each chunk and add it to the VectorIndex
    5. Store each chunk with its embedding reference

    A chunk that fails to embed is stored without a vector and picked up
    later by lazy backfill at query time.
    """

    def __init__(
        self,
        content_store: ContentStore,
        vector_index: VectorIndex,
        embedder: Embedder,
        chunker: Chunker,
        embedding_mode: EmbeddingMode = "lazy",
        max_content_length: int | None = None,
        max_chunks_per_item: int | None = None,
    ) -> None:
        """Initialize the ingestor with all required components.

        Args:
            content_store: Durable store for items and chunks
            vector_index: Index receiving chunk embeddings
            embedder: Component to embed chunks
            chunker: Chunking policy
            embedding_mode: "eager" embeds at ingest time, "lazy" defers to query time
            max_content_length: Characters kept per item (None = unlimited)
            max_chunks_per_item: Chunks kept per item (None = unlimited)
        """
        self.content_store = content_store
        self.vector_index = vector_index
        self.embedder = embedder
        self.chunker = chunker
        self.embedding_mode = embedding_mode
        self.max_content_length = max_content_length
        self.max_chunks_per_item = max_chunks_per_item

    @property
    def embeds_eagerly(self) -> bool:
        return self.embedding_mode == "eager" and self.embedder.available

    async def ingest(
        self,
        content: str,
        item_type: ItemType = ItemType.TEXT,
        metadata: dict[str, Any] | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> IngestSummary:
        """Ingest one piece of content.

        Args:
            content: Text to store
            item_type: Whether the content came from a note or a URL
            metadata: Caller metadata stored with the item
            on_progress: Optional progress callback

        Returns:
            IngestSummary with chunk and embedding counts
        """
        progress = on_progress or _no_progress

        truncated = False
        if self.max_content_length is not None and len(content) > self.max_content_length:
            content = content[: self.max_content_length]
            truncated = True

        item = Item(
            id=str(uuid4()),
            type=item_type,
            content=content,
            metadata={**(metadata or {}), "characterCount": len(content)},
        )
        progress("storing", 0, 1, "Storing item...")
        self.content_store.insert_item(item)
        progress("storing", 1, 1, "Storing item complete")

        pieces = self.chunker.chunk(content)
        if self.max_chunks_per_item is not None:
            pieces = pieces[: self.max_chunks_per_item]
        progress("chunking", 1, 1, f"Created {len(pieces)} chunks")

        embedded = 0
        failed = 0
        for index, piece in enumerate(pieces):
            chunk = Chunk(
                id=Chunk.make_id(item.id, index),
                item_id=item.id,
                content=piece,
                chunk_index=index,
            )
            if self.embeds_eagerly:
                chunk.embedding_ref = await self._embed_chunk(chunk)
                if chunk.embedding_ref is None:
                    failed += 1
                else:
                    embedded += 1
                progress(
                    "embedding",
                    index + 1,
                    len(pieces),
                    f"Embedded {index + 1}/{len(pieces)} chunks",
                )
            self.content_store.insert_chunk(chunk)

        logger.info(
            "Ingested %s item %s: %d chunks, %d embedded, %d failed",
            item_type.value,
            item.id,
            len(pieces),
            embedded,
            failed,
        )
        return IngestSummary(
            item_id=item.id,
            item_type=item_type,
            chunks=len(pieces),
            embedded=embedded,
            failed=failed,
            truncated=truncated,
        )

    async def _embed_chunk(self, chunk: Chunk) -> int | None:
        """Embed one chunk and index it. Returns None if embedding failed."""
        try:
            vector = await self.embedder.aembed_text(chunk.content)
            return self.vector_index.add_embedding(chunk.id, vector)
        except (ProviderError, DimensionMismatch) as e:
            logger.warning("Failed to embed chunk %s: %s", chunk.id, e)
            return None
