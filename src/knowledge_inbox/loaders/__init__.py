# src/knowledge_inbox/loaders/__init__.py
"""Content loaders for Knowledge Inbox."""

from knowledge_inbox.loaders.url import LoadedPage, UrlLoader

__all__ = ["LoadedPage", "UrlLoader"]
