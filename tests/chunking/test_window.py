# tests/chunking/test_window.py
"""Tests for the fixed-window chunker."""

import pytest

from knowledge_inbox.chunking import Chunker, WindowChunker

# 200-character windows with a 40-character overlap
SIZE, OVERLAP = 50, 10


@pytest.fixture
def chunker():
    return WindowChunker(chunk_size=SIZE, chunk_overlap=OVERLAP, chars_per_token=4)


class TestWindowChunkerInit:
    def test_is_chunker(self, chunker):
        assert isinstance(chunker, Chunker)

    def test_window_in_characters(self, chunker):
        assert chunker.window_chars == 200
        assert chunker.overlap_chars == 40

    def test_rejects_non_positive_size(self):
        with pytest.raises(ValueError):
            WindowChunker(chunk_size=0, chunk_overlap=0)

    def test_rejects_negative_overlap(self):
        with pytest.raises(ValueError):
            WindowChunker(chunk_size=10, chunk_overlap=-1)

    def test_accepts_overlap_of_whole_window(self):
        chunker = WindowChunker(chunk_size=10, chunk_overlap=10)

        assert chunker.overlap_chars == chunker.window_chars


class TestWindowChunking:
    def test_short_text_is_single_chunk(self, chunker):
        assert chunker.chunk("  Hello world.  ") == ["Hello world."]

    def test_empty_text_has_no_chunks(self, chunker):
        assert chunker.chunk("") == []
        assert chunker.chunk("   \n  ") == []

    def test_fixed_windows_without_breaks(self, chunker):
        text = "abcdefghij" * 100

        chunks = chunker.chunk(text)

        # Windows start at 0, 160, 320, 480, 640, 800
        assert len(chunks) == 6
        assert all(len(c) == 200 for c in chunks)
        assert chunks[0] == text[:200]
        assert chunks[-1] == text[800:]

    def test_consecutive_windows_overlap(self, chunker):
        text = "abcdefghij" * 100

        chunks = chunker.chunk(text)

        for previous, current in zip(chunks, chunks[1:]):
            assert current[:40] == previous[-40:]

    def test_zero_overlap(self):
        chunker = WindowChunker(chunk_size=50, chunk_overlap=0)
        text = "x" * 400

        chunks = chunker.chunk(text)

        assert chunks == ["x" * 200, "x" * 200]

    def test_snaps_to_sentence_end_past_midpoint(self, chunker):
        text = "A" * 150 + ". " + "B" * 300

        chunks = chunker.chunk(text)

        assert chunks[0] == "A" * 150 + "."
        # Next window starts one overlap before the snapped end
        assert chunks[1].startswith("A" * 39 + ".")

    def test_snaps_to_newline(self, chunker):
        text = "A" * 120 + "\n" + "B" * 300

        chunks = chunker.chunk(text)

        assert chunks[0] == "A" * 120

    def test_ignores_break_before_midpoint(self, chunker):
        text = "A" * 50 + ". " + "B" * 400

        chunks = chunker.chunk(text)

        assert len(chunks[0]) == 200

    def test_chunks_are_trimmed_and_non_empty(self, chunker):
        text = ("Sentence number one is here. " * 40).strip()

        chunks = chunker.chunk(text)

        assert chunks
        for chunk in chunks:
            assert chunk
            assert chunk == chunk.strip()
            assert len(chunk) <= 200

    def test_covers_end_of_text(self, chunker):
        text = "word " * 300 + "THE-END"

        chunks = chunker.chunk(text)

        assert chunks[-1].endswith("THE-END")

    def test_half_window_overlap(self):
        chunker = WindowChunker(chunk_size=10, chunk_overlap=5)
        text = "abcdefghij" * 20

        chunks = chunker.chunk(text)

        # 40-character windows advancing by 20
        assert len(chunks) == 9
        assert chunks[1] == text[20:60]
        assert chunks[-1] == text[160:]

    @pytest.mark.parametrize("overlap", [10, 25])
    def test_overlap_at_or_above_window_terminates(self, overlap):
        chunker = WindowChunker(chunk_size=10, chunk_overlap=overlap)
        text = "abcdefghij" * 20

        chunks = chunker.chunk(text)

        # Overlap is dropped each step, so windows tile the text
        assert chunks == [text[i : i + 40] for i in range(0, 200, 40)]

    def test_large_overlap_with_sentences(self):
        chunker = WindowChunker(chunk_size=10, chunk_overlap=30)
        text = ("Short one. Another sentence here.\n" * 30).strip()

        chunks = chunker.chunk(text)

        assert chunks
        for chunk in chunks:
            assert chunk
            assert chunk == chunk.strip()
            assert len(chunk) <= 40
        assert chunks[-1].endswith("sentence here.")
