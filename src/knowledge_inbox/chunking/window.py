# src/knowledge_inbox/chunking/window.py
"""Fixed-window chunker with overlap and sentence boundary snapping."""

from knowledge_inbox.chunking.base import Chunker

# Characters that count as a natural break point
BREAK_CHARS = (".", "\n")


class WindowChunker(Chunker):
    """Chunker that cuts text into fixed-size character windows.

    Sizes are given in tokens and converted with a constant
    characters-per-token ratio; no tokenizer is involved.

    When a window ends before the end of the text, it is shortened to the
    last sentence terminator or newline if that break lies in the second
    half of the window. The next window starts ``chunk_overlap`` tokens
    before the end of the previous one.
    """

    def __init__(
        self,
        chunk_size: int = 500,
        chunk_overlap: int = 100,
        chars_per_token: int = 4,
    ) -> None:
        """Initialize the window chunker.

        Args:
            chunk_size: Window size in tokens.
            chunk_overlap: Overlap between consecutive windows in tokens.
                           Any non-negative value; an overlap that would
                           stall the loop is dropped for that step.
            chars_per_token: Characters per token used for the conversion.
        """
        if chunk_size < 1:
            raise ValueError("chunk_size must be positive")
        if chunk_overlap < 0:
            raise ValueError("chunk_overlap must not be negative")

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.window_chars = chunk_size * chars_per_token
        self.overlap_chars = chunk_overlap * chars_per_token

    def chunk(self, text: str) -> list[str]:
        """Split text into overlapping windows."""
        chunks: list[str] = []
        length = len(text)
        start = 0

        while start < length:
            end = min(start + self.window_chars, length)
            window = text[start:end]

            if end < length:
                window = self._snap(window)

            chunks.append(window.strip())

            if end >= length:
                break

            next_start = start + len(window) - self.overlap_chars
            if next_start <= start:
                # Overlap would stall the loop; continue right after this window
                next_start = start + len(window)
            start = next_start

        return [c for c in chunks if c]

    def _snap(self, window: str) -> str:
        """Cut the window at the last break point if it is past the midpoint."""
        break_point = max(window.rfind(ch) for ch in BREAK_CHARS)
        if break_point > self.window_chars * 0.5:
            return window[: break_point + 1]
        return window
