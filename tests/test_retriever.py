# tests/test_retriever.py
"""Tests for the Retriever pipeline."""

import pytest
from conftest import DIMS, FAKE_ANSWER, FakeLLMClient, HashEmbedder

from knowledge_inbox.chunking import WindowChunker
from knowledge_inbox.embedder import NoEmbedder
from knowledge_inbox.exceptions import ProviderError
from knowledge_inbox.generator import SYSTEM_PROMPT, ClientAnswerGenerator
from knowledge_inbox.ingestor import Ingestor
from knowledge_inbox.models import NO_RELEVANT_CONTENT_ANSWER, ChunkRecord, ItemType, ScoredChunk
from knowledge_inbox.retriever import Retriever, build_context, preview, to_source_views
from knowledge_inbox.stores import ExactVectorIndex, InMemoryContentStore

NOTES = [
    "Python is a programming language created by Guido van Rossum.",
    "The Eiffel Tower is a landmark in Paris, France.",
    "Sourdough bread needs a starter, flour, water and salt.",
]


@pytest.fixture
def stores():
    """Create store instances."""
    return {
        "content_store": InMemoryContentStore(),
        "vector_index": ExactVectorIndex(dimensions=DIMS),
    }


async def ingest_notes(stores, embedder, notes=NOTES, embedding_mode="lazy") -> list[str]:
    ingestor = Ingestor(
        content_store=stores["content_store"],
        vector_index=stores["vector_index"],
        embedder=embedder,
        chunker=WindowChunker(),
        embedding_mode=embedding_mode,
    )
    return [(await ingestor.ingest(note)).item_id for note in notes]


def make_retriever(stores, embedder, llm_client=None, **kwargs) -> Retriever:
    generator = ClientAnswerGenerator(llm_client) if llm_client is not None else None
    return Retriever(
        content_store=stores["content_store"],
        vector_index=stores["vector_index"],
        embedder=embedder,
        answer_generator=generator,
        **kwargs,
    )


def record(content: str, chunk_id: str = "c1") -> ChunkRecord:
    return ChunkRecord(
        id=chunk_id,
        item_id="item",
        content=content,
        chunk_index=0,
        item_type=ItemType.TEXT,
    )


class TestHelpers:
    def test_build_context_numbers_chunks(self):
        results = [
            ScoredChunk(chunk=record("First", "c1"), score=0.9),
            ScoredChunk(chunk=record("Second", "c2"), score=0.5),
        ]

        assert build_context(results) == "[1] First\n\n[2] Second"

    def test_preview_short(self):
        assert preview("short") == "short"

    def test_preview_truncates(self):
        assert preview("x" * 250) == "x" * 200 + "..."

    def test_preview_exact_limit(self):
        assert preview("x" * 200) == "x" * 200

    def test_source_views(self):
        results = [ScoredChunk(chunk=record("y" * 300), score=0.8)]

        (view,) = to_source_views(results)

        assert view.index == 1
        assert view.content == "y" * 200 + "..."
        assert view.item_id == "item"
        assert view.score == 0.8


class TestRetrieverInit:
    def test_defaults(self, stores):
        retriever = make_retriever(stores, HashEmbedder())

        assert retriever.default_k == 5
        assert retriever.system_prompt == SYSTEM_PROMPT
        assert retriever.mode == "vector"

    def test_keyword_mode_without_embedder(self, stores):
        assert make_retriever(stores, NoEmbedder()).mode == "keyword"

    def test_custom_system_prompt(self, stores):
        retriever = make_retriever(stores, HashEmbedder(), system_prompt="Answer in French.")
        assert retriever.system_prompt == "Answer in French."


class TestKeywordMode:
    @pytest.mark.asyncio
    async def test_answers_from_matching_chunks(self, stores):
        await ingest_notes(stores, NoEmbedder())
        llm = FakeLLMClient()
        retriever = make_retriever(stores, NoEmbedder(), llm)

        response = await retriever.query("Who created Python?")

        assert response.mode == "keyword"
        assert response.answer == FAKE_ANSWER
        assert len(response.sources) == 1
        assert response.sources[0].content == NOTES[0]
        # "created" and "python" each match once
        assert response.confidence == pytest.approx(0.2)

    @pytest.mark.asyncio
    async def test_confidence_capped_at_one(self, stores):
        await ingest_notes(stores, NoEmbedder(), notes=["python " * 30])
        retriever = make_retriever(stores, NoEmbedder())

        response = await retriever.query("python")

        assert response.confidence == 1.0

    @pytest.mark.asyncio
    async def test_no_match_returns_advisory(self, stores):
        await ingest_notes(stores, NoEmbedder())
        llm = FakeLLMClient()
        retriever = make_retriever(stores, NoEmbedder(), llm)

        response = await retriever.query("quantum chromodynamics")

        assert response.answer == NO_RELEVANT_CONTENT_ANSWER
        assert response.sources == []
        assert response.confidence == 0.0
        assert llm.calls == []

    @pytest.mark.asyncio
    async def test_empty_store(self, stores):
        response = await make_retriever(stores, NoEmbedder()).query("anything at all")

        assert response.answer == NO_RELEVANT_CONTENT_ANSWER

    @pytest.mark.asyncio
    async def test_backfill_is_noop(self, stores):
        await ingest_notes(stores, NoEmbedder())

        assert await make_retriever(stores, NoEmbedder()).backfill() == 0
        assert stores["vector_index"].get_size() == 0


class TestVectorMode:
    @pytest.mark.asyncio
    async def test_lazy_backfill_on_first_query(self, stores):
        embedder = HashEmbedder()
        await ingest_notes(stores, embedder)
        assert stores["vector_index"].get_size() == 0

        retriever = make_retriever(stores, embedder, FakeLLMClient())
        response = await retriever.query("What is the Eiffel Tower?", k=1)

        assert stores["vector_index"].get_size() == len(NOTES)
        assert response.mode == "vector"
        assert response.sources[0].content == NOTES[1]
        assert 0.0 < response.confidence <= 1.0

    @pytest.mark.asyncio
    async def test_backfill_only_embeds_missing(self, stores):
        embedder = HashEmbedder()
        await ingest_notes(stores, embedder, notes=NOTES[:1], embedding_mode="eager")
        await ingest_notes(stores, embedder, notes=NOTES[1:])
        retriever = make_retriever(stores, embedder)

        assert await retriever.backfill() == len(NOTES) - 1
        assert await retriever.backfill() == 0
        assert stores["vector_index"].get_size() == len(NOTES)

    @pytest.mark.asyncio
    async def test_backfill_records_embedding_refs(self, stores):
        embedder = HashEmbedder()
        await ingest_notes(stores, embedder)

        await make_retriever(stores, embedder).backfill()

        refs = [c.embedding_ref for c in stores["content_store"].get_all_chunks()]
        assert sorted(refs) == list(range(len(NOTES)))

    @pytest.mark.asyncio
    async def test_backfill_survives_failing_chunk(self, stores):
        notes = [NOTES[0], "POISON note that cannot be embedded", NOTES[2]]
        failing = HashEmbedder(fail_marker="POISON")
        await ingest_notes(stores, failing, notes=notes)
        retriever = make_retriever(stores, failing)

        assert await retriever.backfill() == 2
        assert stores["vector_index"].get_size() == 2

        # The failed chunk is retried on the next call
        failing.fail_marker = None
        assert await retriever.backfill() == 1

    @pytest.mark.asyncio
    async def test_results_are_ranked_and_limited(self, stores):
        embedder = HashEmbedder()
        await ingest_notes(stores, embedder)
        retriever = make_retriever(stores, embedder)

        results = await retriever.retrieve("Python programming language", k=2)

        assert len(results) == 2
        assert results[0].chunk.content == NOTES[0]
        assert results[0].score >= results[1].score

    @pytest.mark.asyncio
    async def test_duplicate_entries_are_deduped(self, stores):
        embedder = HashEmbedder()
        await ingest_notes(stores, embedder, notes=NOTES[:1])
        retriever = make_retriever(stores, embedder)
        await retriever.backfill()
        (chunk,) = stores["content_store"].get_all_chunks()
        stores["vector_index"].add_embedding(chunk.id, embedder.embed_text(chunk.content))

        results = await retriever.retrieve("Python", k=5)

        assert [r.chunk.id for r in results] == [chunk.id]

    @pytest.mark.asyncio
    async def test_duplicate_entries_do_not_crowd_out_other_chunks(self, stores):
        embedder = HashEmbedder()
        await ingest_notes(stores, embedder, notes=NOTES[:2])
        retriever = make_retriever(stores, embedder)
        await retriever.backfill()
        first, second = stores["content_store"].get_all_chunks()
        if "Python" not in first.content:
            first, second = second, first
        stores["vector_index"].add_embedding(first.id, embedder.embed_text(first.content))

        results = await retriever.retrieve("Python programming language", k=2)

        assert [r.chunk.id for r in results] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_unknown_chunk_ids_are_dropped(self, stores):
        embedder = HashEmbedder()
        await ingest_notes(stores, embedder, notes=NOTES[:1])
        stores["vector_index"].add_embedding("ghost_chunk_0", embedder.embed_text("Python ghost"))
        retriever = make_retriever(stores, embedder)

        results = await retriever.retrieve("Python", k=5)

        assert "ghost_chunk_0" not in [r.chunk.id for r in results]
        assert len(results) == 1

    @pytest.mark.asyncio
    async def test_empty_index_returns_advisory(self, stores):
        response = await make_retriever(stores, HashEmbedder()).query("Python?")

        assert response.answer == NO_RELEVANT_CONTENT_ANSWER
        assert response.mode == "vector"

    @pytest.mark.asyncio
    async def test_question_embedding_failure_raises(self, stores):
        embedder = HashEmbedder()
        await ingest_notes(stores, embedder)
        embedder.fail_marker = "POISON"
        retriever = make_retriever(stores, embedder)

        with pytest.raises(ProviderError):
            await retriever.query("POISON question")


class TestSynthesis:
    @pytest.mark.asyncio
    async def test_prompt_holds_numbered_context(self, stores):
        embedder = HashEmbedder()
        await ingest_notes(stores, embedder)
        llm = FakeLLMClient()
        retriever = make_retriever(stores, embedder, llm)

        await retriever.query("Python language", k=2)

        messages = llm.calls[0]["messages"]
        assert messages[0] == {"role": "system", "content": SYSTEM_PROMPT}
        assert "[1] " + NOTES[0] in messages[1]["content"]
        assert "[2] " in messages[1]["content"]
        assert "Question: Python language" in messages[1]["content"]

    @pytest.mark.asyncio
    async def test_raw_mode_skips_generation(self, stores):
        embedder = HashEmbedder()
        await ingest_notes(stores, embedder)
        llm = FakeLLMClient()
        retriever = make_retriever(stores, embedder, llm)

        response = await retriever.query("Python", synthesize=False)

        assert response.answer is None
        assert response.sources
        assert llm.calls == []

    @pytest.mark.asyncio
    async def test_no_generator_means_raw(self, stores):
        embedder = HashEmbedder()
        await ingest_notes(stores, embedder)

        response = await make_retriever(stores, embedder).query("Python")

        assert response.answer is None
        assert response.sources

    @pytest.mark.asyncio
    async def test_generation_failure_raises(self, stores):
        embedder = HashEmbedder()
        await ingest_notes(stores, embedder)
        retriever = make_retriever(stores, embedder, FakeLLMClient(fail=True))

        with pytest.raises(ProviderError):
            await retriever.query("Python")
