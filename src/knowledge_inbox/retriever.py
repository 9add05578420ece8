"""Retrieval pipeline for Knowledge Inbox."""

import asyncio
import logging

from knowledge_inbox.embedder import Embedder
from knowledge_inbox.exceptions import DimensionMismatch, ProviderError
from knowledge_inbox.generator import SYSTEM_PROMPT, AnswerGenerator, build_user_message
from knowledge_inbox.keyword import keyword_search
from knowledge_inbox.models import (
    QueryResponse,
    RetrievalMode,
    ScoredChunk,
    SourceView,
)
from knowledge_inbox.models.results import SOURCE_PREVIEW_CHARS
from knowledge_inbox.stores import ContentStore, VectorIndex

logger = logging.getLogger(__name__)


def build_context(results: list[ScoredChunk]) -> str:
    """Number each retrieved chunk as "[i] content" and join them with blank lines."""
    return "\n\n".join(f"[{i}] {result.chunk.content}" for i, result in enumerate(results, 1))


def preview(content: str, limit: int = SOURCE_PREVIEW_CHARS) -> str:
    """Shorten content to limit characters, marking the cut with "..."."""
    if len(content) <= limit:
        return content
    return content[:limit] + "..."


def to_source_views(results: list[ScoredChunk]) -> list[SourceView]:
    return [
        SourceView(
            index=i,
            content=preview(result.chunk.content),
            item_id=result.chunk.item_id,
            item_type=result.chunk.item_type,
            score=result.score,
            metadata=result.chunk.item_metadata,
        )
        for i, result in enumerate(results, 1)
    ]


class Retriever:
    """Orchestrates the retrieval pipeline.

    The retrieval mode is decided once from the embedder: vector search when
    it is available, keyword search over stored chunks otherwise.
    """

    def __init__(
        self,
        content_store: ContentStore,
        vector_index: VectorIndex,
        embedder: Embedder,
        answer_generator: AnswerGenerator | None = None,
        default_k: int = 5,
        keyword_confidence_scale: float = 10.0,
        system_prompt: str | None = None,
    ) -> None:
        """Initialize the retriever.

        Args:
            content_store: Store holding items and chunks
            vector_index: Index searched in vector mode
            embedder: Embedder for chunks and questions
            answer_generator: Answer synthesizer (optional; raw mode without it)
            default_k: Default number of results to return
            keyword_confidence_scale: Keyword score treated as full confidence
            system_prompt: Custom system instruction for answer synthesis
        """
        self.content_store = content_store
        self.vector_index = vector_index
        self.embedder = embedder
        self.answer_generator = answer_generator
        self.default_k = default_k
        self.keyword_confidence_scale = keyword_confidence_scale
        self.system_prompt = system_prompt or SYSTEM_PROMPT
        self.mode: RetrievalMode = "vector" if embedder.available else "keyword"
        self._backfill_lock = asyncio.Lock()

    async def backfill(self) -> int:
        """Embed every stored chunk that has no index entry yet.

        Chunks are embedded one at a time. A chunk that fails is logged and
        left for the next call.

        Returns:
            Number of chunks embedded by this call
        """
        if not self.embedder.available:
            return 0

        async with self._backfill_lock:
            missing = [
                chunk
                for chunk in self.content_store.get_all_chunks()
                if not self.vector_index.has_embedding(chunk.id)
            ]
            if not missing:
                return 0

            logger.info("Backfilling embeddings for %d chunks", len(missing))
            embedded = 0
            for chunk in missing:
                try:
                    vector = await self.embedder.aembed_text(chunk.content)
                    embedding_id = self.vector_index.add_embedding(chunk.id, vector)
                except (ProviderError, DimensionMismatch) as e:
                    logger.warning("Failed to embed chunk %s: %s", chunk.id, e)
                    continue
                self.content_store.set_embedding_ref(chunk.id, embedding_id)
                embedded += 1
            return embedded

    async def retrieve(self, question: str, k: int | None = None) -> list[ScoredChunk]:
        """Get the chunks most relevant to a question.

        Args:
            question: User's question
            k: Number of results to return (default: self.default_k)

        Returns:
            List of ScoredChunk ordered by relevance
        """
        k = self.default_k if k is None else k

        if self.mode == "keyword":
            return keyword_search(question, self.content_store.get_all_chunks(), k)

        await self.backfill()

        query_vector = await self.embedder.aembed_text(question)
        best = self._search_distinct(query_vector, k)
        if not best:
            return []

        records = self.content_store.get_chunks_by_ids(list(best))
        return [ScoredChunk(chunk=record, score=best[record.id]) for record in records]

    def _search_distinct(self, vector: list[float], k: int) -> dict[str, float]:
        """Search until k distinct chunks are found or the index is exhausted.

        Re-embedded chunks have several index entries, so a plain top-k
        search can return fewer than k chunks. The search is widened by the
        number of duplicates seen until enough distinct chunks turn up.
        """
        size = self.vector_index.get_size()
        fetch = k
        while True:
            # Matches are ranked; the first hit for a chunk is its best
            best: dict[str, float] = {}
            for match in self.vector_index.search(vector, k=fetch):
                best.setdefault(match.chunk_id, match.similarity)

            if len(best) >= k or fetch >= size:
                return dict(list(best.items())[:k])
            fetch = min(size, fetch + k - len(best))

    async def query(
        self,
        question: str,
        k: int | None = None,
        synthesize: bool = True,
    ) -> QueryResponse:
        """Answer a question using retrieved context.

        If an answer generator is configured and synthesize is True, an answer
        is generated from the context. Otherwise answer is None.

        Args:
            question: User's question
            k: Number of chunks to retrieve
            synthesize: Whether to generate an answer

        Returns:
            QueryResponse with sources, confidence and the answer
        """
        results = await self.retrieve(question, k=k)
        if not results:
            return QueryResponse.no_relevant_content(self.mode)

        answer = None
        if synthesize and self.answer_generator is not None:
            context = build_context(results)
            answer = await self.answer_generator.agenerate(
                self.system_prompt,
                build_user_message(context, question),
            )

        return QueryResponse(
            answer=answer,
            sources=to_source_views(results),
            confidence=self._confidence(results[0].score),
            mode=self.mode,
        )

    def _confidence(self, top_score: float) -> float:
        if self.mode == "keyword":
            return min(1.0, top_score / self.keyword_confidence_scale)
        return min(1.0, max(0.0, top_score))
