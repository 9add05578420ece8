# src/knowledge_inbox/embedder/__init__.py
"""Embedding functionality for Knowledge Inbox."""

from knowledge_inbox.embedder.base import Embedder
from knowledge_inbox.embedder.client import ClientEmbedder
from knowledge_inbox.embedder.null import NoEmbedder

__all__ = ["Embedder", "ClientEmbedder", "NoEmbedder"]
