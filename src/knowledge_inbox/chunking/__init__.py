"""Chunking policies for Knowledge Inbox.

This module exports:
- Chunker: Abstract base class for chunking policies
- WindowChunker: Fixed-size windows with overlap and boundary snapping

Example:
    from knowledge_inbox.chunking import WindowChunker

    chunker = WindowChunker(chunk_size=500, chunk_overlap=100)
    pieces = chunker.chunk(long_text)
"""

from knowledge_inbox.chunking.base import Chunker
from knowledge_inbox.chunking.window import WindowChunker

__all__ = ["Chunker", "WindowChunker"]
