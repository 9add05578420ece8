# src/knowledge_inbox/inbox.py
"""Central configuration class for Knowledge Inbox."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from knowledge_inbox.configuration import ProviderConfig, StorageConfig
    from knowledge_inbox.ingestor import Ingestor, ProgressCallback
    from knowledge_inbox.models import IngestSummary, Item, QueryResponse, RetrievalMode
    from knowledge_inbox.retriever import Retriever
    from knowledge_inbox.stores import ContentStore, VectorIndex

from knowledge_inbox.chunking import WindowChunker
from knowledge_inbox.loaders import UrlLoader
from knowledge_inbox.models import ItemType
from knowledge_inbox.settings import Settings

logger = logging.getLogger(__name__)


class Inbox:
    """Central entry point bundling stores, providers and the pipelines.

    There are two ways to create an Inbox:

    1. With a storage bundle:

        from knowledge_inbox import Inbox, LiteLLMProvider, LocalStorage

        inbox = Inbox(
            provider=LiteLLMProvider(
                llm="openai/gpt-4o-mini",
                embedding="openai/text-embedding-3-small",
            ),
            storage=LocalStorage("./inbox_data"),
        )
        await inbox.ingest_text("Python is a programming language")
        response = await inbox.query("What is Python?")

    2. With explicit stores:

        inbox = Inbox(
            provider=LiteLLMProvider(llm="openai/gpt-4o-mini"),
            content_store=SQLiteContentStore("./inbox_data/inbox.db"),
            vector_index=ExactVectorIndex(dimensions=1536),
        )
    """

    def __init__(
        self,
        *,
        provider: ProviderConfig,
        # EITHER storage bundle...
        storage: StorageConfig | None = None,
        # ...OR explicit stores
        content_store: ContentStore | None = None,
        vector_index: VectorIndex | None = None,
        # Common
        settings: Settings | None = None,
        url_loader: UrlLoader | None = None,
    ) -> None:
        """Create an Inbox.

        Args:
            provider: Provider configuration (builds embedder and answer generator).
            storage: Storage bundle. Mutually exclusive with explicit stores.
            content_store: Explicit content store. Use with vector_index.
            vector_index: Explicit vector index.
            settings: Behavioral settings (chunking, embedding mode, limits).
            url_loader: Loader used by ingest_url. Built from settings if None.

        Raises:
            ValueError: If neither storage bundle nor both explicit stores are
                        provided, or if both are provided.
        """
        self._settings = settings if settings is not None else Settings()

        # Path 1: Storage bundle
        if storage is not None:
            if content_store is not None or vector_index is not None:
                raise ValueError("Cannot mix 'storage' bundle with explicit stores")
            self.content_store, self.vector_index = storage.build_stores(self._settings)

        # Path 2: Explicit stores
        elif content_store is not None and vector_index is not None:
            self.content_store = content_store
            self.vector_index = vector_index

        else:
            raise ValueError(
                "Must provide either 'storage' bundle or both explicit stores "
                "(content_store, vector_index)"
            )

        self.embedder = provider.build_embedder(self._settings)
        self.answer_generator = provider.build_answer_generator(self._settings)
        self._llm_model: str | None = getattr(provider, "llm", None)
        self._embedding_model: str | None = getattr(provider, "embedding", None)

        self._url_loader = url_loader or UrlLoader(
            timeout=self._settings.fetch_timeout,
            max_bytes=self._settings.max_fetch_bytes,
        )
        self._retriever: Retriever | None = None

        logger.info(
            "Inbox ready: mode=%s, embedding_mode=%s, llm=%s, embedding=%s",
            self.mode,
            self._settings.embedding_mode,
            self._llm_model or "none",
            self._embedding_model or "none",
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def mode(self) -> RetrievalMode:
        """Retrieval mode: "vector" with an embedding provider, "keyword" without."""
        return "vector" if self.embedder.available else "keyword"

    def ingestor(self) -> Ingestor:
        """Create an Ingestor using this instance's stores and settings."""
        from knowledge_inbox.ingestor import Ingestor

        return Ingestor(
            content_store=self.content_store,
            vector_index=self.vector_index,
            embedder=self.embedder,
            chunker=WindowChunker(
                chunk_size=self._settings.chunk_size,
                chunk_overlap=self._settings.chunk_overlap,
                chars_per_token=self._settings.chars_per_token,
            ),
            embedding_mode=self._settings.embedding_mode,
            max_content_length=self._settings.max_content_length,
            max_chunks_per_item=self._settings.max_chunks_per_item,
        )

    def retriever(self) -> Retriever:
        """Get the Retriever for this instance.

        The same Retriever is returned on every call so that concurrent
        queries share one backfill lock.
        """
        if self._retriever is None:
            from knowledge_inbox.retriever import Retriever

            self._retriever = Retriever(
                content_store=self.content_store,
                vector_index=self.vector_index,
                embedder=self.embedder,
                answer_generator=self.answer_generator,
                default_k=self._settings.default_k,
                keyword_confidence_scale=self._settings.keyword_confidence_scale,
                system_prompt=self._settings.system_prompt,
            )
        return self._retriever

    async def ingest_text(
        self,
        text: str,
        metadata: dict[str, Any] | None = None,
        *,
        on_progress: ProgressCallback | None = None,
    ) -> IngestSummary:
        """Save a text note."""
        return await self.ingestor().ingest(
            text, ItemType.TEXT, metadata, on_progress=on_progress
        )

    async def ingest_url(
        self,
        url: str,
        metadata: dict[str, Any] | None = None,
        *,
        on_progress: ProgressCallback | None = None,
    ) -> IngestSummary:
        """Fetch a web page and save its text.

        Raises:
            FetchError: If the page cannot be fetched or has too little text.
        """
        page = await self._url_loader.load(url)
        item_metadata = {**(metadata or {}), "url": page.url, "title": page.title}
        return await self.ingestor().ingest(
            page.text, ItemType.URL, item_metadata, on_progress=on_progress
        )

    async def query(
        self,
        question: str,
        k: int | None = None,
        *,
        synthesize: bool = True,
    ) -> QueryResponse:
        """Answer a question from saved content.

        Raises:
            ProviderError: If embedding the question or generating the answer fails.
        """
        return await self.retriever().query(question, k=k, synthesize=synthesize)

    def list_items(self) -> list[Item]:
        """All saved items, newest first."""
        return self.content_store.get_all_items()

    def get_item(self, item_id: str) -> Item | None:
        return self.content_store.get_item(item_id)

    def stats(self) -> dict[str, Any]:
        """Counts and configuration summary."""
        return {
            "items": self.content_store.count_items(),
            "chunks": self.content_store.count_chunks(),
            "vectors": self.vector_index.get_size(),
            "mode": self.mode,
            "embedding_mode": self._settings.embedding_mode,
            "llm_model": self._llm_model,
            "embedding_model": self._embedding_model,
            "default_k": self._settings.default_k,
        }

    async def rebuild_index(self) -> int:
        """Drop every vector and re-embed all stored chunks.

        Returns:
            Number of chunks embedded
        """
        self.vector_index.clear()
        return await self.retriever().backfill()

    def close(self) -> None:
        """Release the vector index.

        SQLite stores use per-operation connections and don't require closing.
        After calling close(), the Inbox instance should not be used.
        """
        self.vector_index.close()
